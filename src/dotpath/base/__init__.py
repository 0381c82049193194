"""
package: dotpath.base
"""

# <AUTOGEN_INIT>
from dotpath.base import (
    config,
    container_probe,
    errors,
    keypath,
    lazy_default,
    string_helpers,
    types,
)


__all__ = [
    "config",
    "container_probe",
    "errors",
    "keypath",
    "lazy_default",
    "string_helpers",
    "types",
]
# </AUTOGEN_INIT>
