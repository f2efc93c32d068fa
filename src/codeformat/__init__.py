"""Text formatting helpers for source code generators.

The package produces indented, brace-wrapped and newline-normalised text
blocks, and splits fully qualified type names into their package and short
name parts. Newline and indent tokens are configurable either per
:class:`Formatter` or for the whole process.
"""

from __future__ import annotations

from .config import FormattingConfig
from .errors import FormattingError, InvalidArgumentError, PreconditionViolationError
from .formatting import (
    Formatter,
    block,
    current_config,
    current_indent_token,
    current_newline,
    double_newline,
    formatter,
    if_else,
    indent,
    join,
    lines,
    lower_first,
    paragraphs,
    repeat,
    reset_config,
    set_config,
    set_indent_token,
    set_newline,
    upper_first,
    with_first,
)
from .naming import (
    SOURCE_EXTENSION,
    file_name_to_type_name,
    package_name,
    short_name,
    strip_generics,
    type_name_to_file_name,
)

__all__ = [
    "Formatter",
    "FormattingConfig",
    "FormattingError",
    "InvalidArgumentError",
    "PreconditionViolationError",
    "SOURCE_EXTENSION",
    "block",
    "current_config",
    "current_indent_token",
    "current_newline",
    "double_newline",
    "file_name_to_type_name",
    "formatter",
    "if_else",
    "indent",
    "join",
    "lines",
    "lower_first",
    "package_name",
    "paragraphs",
    "repeat",
    "reset_config",
    "set_config",
    "set_indent_token",
    "set_newline",
    "short_name",
    "strip_generics",
    "type_name_to_file_name",
    "upper_first",
    "with_first",
]

__version__ = "0.1.0"
