"""
package: dotpath

Read, write, test and delete values deep inside nested dicts and lists with
dot-separated keypaths, plus a handful of list/dict and string helpers.
"""

# <AUTOGEN_INIT>
from dotpath import (
    array_helpers,
    base,
    collection_ops,
    facades,
    nested_access,
    predicates,
    xlogging,
)
from dotpath.base.errors import DotPathError, SampleSizeError, UnknownOperationError
from dotpath.base.lazy_default import Deferred, value_of
from dotpath.collection_ops import collapse, flatten, pluck
from dotpath.facades import Arr, Str
from dotpath.nested_access import keypath_forget, keypath_get, keypath_set
from dotpath.predicates import keypath_has, keypath_has_any


__all__ = [
    "Arr",
    "Deferred",
    "DotPathError",
    "SampleSizeError",
    "Str",
    "UnknownOperationError",
    "array_helpers",
    "base",
    "collapse",
    "collection_ops",
    "facades",
    "flatten",
    "keypath_forget",
    "keypath_get",
    "keypath_has",
    "keypath_has_any",
    "keypath_set",
    "nested_access",
    "pluck",
    "predicates",
    "value_of",
    "xlogging",
]
# </AUTOGEN_INIT>

__version__ = "0.1.0"
