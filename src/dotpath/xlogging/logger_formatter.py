# File: src/dotpath/xlogging/logger_formatter.py
"""
Formatter used by the stderr handler that CoreLogger installs on the root.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Literal

from colorama import Fore, Style

from dotpath.base import config as cfg


__all__ = ["DEFAULT_FORMAT", "CoreFormatter", "get_color_code"]


FormatStyle = Literal["%", "{", "$"]

DEFAULT_FORMAT = "%(levelName)s %(name)s %(fileAndLine)s %(message)s"

COLOR_MAP: dict[str, str] = {
    "fileAndLine": Fore.CYAN,
    "TRACE": Fore.MAGENTA,
    "DEBUG": Style.DIM,
    "INFO": Fore.WHITE,
    "WARNING": Fore.YELLOW,
    "ERROR": Fore.LIGHTRED_EX,
    "CRITICAL": Fore.RED + Style.BRIGHT,
}


def get_color_code(key: str | None = None, *, enabled: bool = True) -> str:
    """
    Return the ANSI code for a level name or record field.

    An empty or unknown key yields the reset code; disabled color yields "".
    """
    if not enabled:
        return ""
    if key and key in COLOR_MAP:
        return COLOR_MAP[key]
    return Style.RESET_ALL


class CoreFormatter(logging.Formatter):
    """
    Adds ``fileAndLine`` and ``levelName`` fields to each record and colors
    them when color output is enabled.
    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        style: FormatStyle = "%",
        validate: bool = True,
        *,
        defaults: dict[str, Any] | None = None,
        use_color: bool | None = None,
    ) -> None:
        """
        :param fmt: Format string; defaults to DEFAULT_FORMAT.
        :param datefmt: Date format for ``%(asctime)s``.
        :param style: Format string style.
        :param validate: Whether to validate the format string.
        :param defaults: Default values for custom fields.
        :param use_color: Force color on or off; None defers to config.color_enabled().
        """
        super().__init__(
            fmt=fmt or DEFAULT_FORMAT,
            datefmt=datefmt,
            style=style,
            validate=validate,
            defaults=defaults,
        )
        self.use_color = use_color

    @property
    def color(self) -> bool:
        return cfg.color_enabled() if self.use_color is None else self.use_color

    def format(self, record: logging.LogRecord) -> str:
        color = self.color
        record.fileAndLine = self.format_fileAndLine(record.pathname, record.lineno, color=color)
        record.levelName = (
            get_color_code(record.levelname, enabled=color)
            + record.levelname
            + get_color_code(enabled=color)
        )
        return super().format(record)

    @staticmethod
    def format_fileAndLine(pathname: str, lineno: int, *, color: bool = False) -> str:
        """Return ``path:line`` relative to the working directory when possible."""
        if not pathname:
            return "<unknown file>"
        path = Path(pathname)
        try:
            shown = path.resolve().relative_to(Path.cwd().resolve()).as_posix()
        except (OSError, ValueError):
            shown = path.as_posix()
        text = f"{shown}:{lineno}"
        return get_color_code("fileAndLine", enabled=color) + text + get_color_code(enabled=color)


# End of file: src/dotpath/xlogging/logger_formatter.py
