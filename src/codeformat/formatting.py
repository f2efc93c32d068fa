"""Common text transformations used when generating source code.

Functions that do not depend on the newline or indent tokens are plain module
level helpers. Everything that emits line breaks or indentation lives on
:class:`Formatter`, which captures one immutable :class:`FormattingConfig`.

The module also keeps a process-wide configuration for callers that do not
want to pass a :class:`Formatter` around. It should be set once during start-up
and must not be changed while other threads are formatting text.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Iterable, TypeVar

from .config import FormattingConfig
from .errors import InvalidArgumentError, PreconditionViolationError

__all__ = [
    "Formatter",
    "block",
    "current_config",
    "current_indent_token",
    "current_newline",
    "double_newline",
    "formatter",
    "if_else",
    "indent",
    "join",
    "lines",
    "lower_first",
    "paragraphs",
    "repeat",
    "reset_config",
    "set_config",
    "set_indent_token",
    "set_newline",
    "upper_first",
    "with_first",
]

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

_LINE_BREAK = re.compile(r"\r?\n")


def join(separator: str, values: Iterable[str]) -> str:
    """Return ``values`` concatenated with ``separator`` between each pair.

    Raises
    ------
    InvalidArgumentError
        If any element of ``values`` is ``None``.
    """

    items = list(values)
    for position, item in enumerate(items):
        if item is None:
            raise InvalidArgumentError(f"value at position {position} must not be None")
    return separator.join(items)


def with_first(text: str | None, callback: Callable[[str], str]) -> str | None:
    """Replace the first character of ``text`` with ``callback(first)``."""

    if text is None:
        return None
    if not text:
        return ""
    return callback(text[0]) + text[1:]


def _single_code_point(mapping: Callable[[str], str]) -> Callable[[str], str]:
    # full case mappings may expand one code point into several ("ß" -> "SS")
    def apply(first: str) -> str:
        mapped = mapping(first)
        return mapped if len(mapped) == 1 else first

    return apply


_to_lower = _single_code_point(str.lower)
_to_upper = _single_code_point(str.upper)


def lower_first(text: str | None) -> str | None:
    """Return ``text`` with its first character lowercased.

    A character whose lowercase form is longer than one code point, such as
    ``"İ"``, is kept as is.
    """

    return with_first(text, _to_lower)


def upper_first(text: str | None) -> str | None:
    """Return ``text`` with its first character uppercased.

    A character whose uppercase form is longer than one code point, such as
    ``"ß"``, is kept as is.
    """

    return with_first(text, _to_upper)


def repeat(text: str, count: int) -> str:
    """Return ``text`` concatenated with itself ``count`` times.

    Raises
    ------
    PreconditionViolationError
        If ``count`` is negative.
    """

    if count < 0:
        raise PreconditionViolationError(f"repeat count must not be negative, got {count}")
    return text * count


def if_else(value: T | None, present: Callable[[T], R], absent: R) -> R:
    """Return ``present(value)`` when ``value`` is not ``None``, else ``absent``."""

    if value is not None:
        return present(value)
    return absent


def _is_row_sequence(value: object) -> bool:
    return isinstance(value, Iterable) and not isinstance(value, (str, bytes))


@dataclass(frozen=True, slots=True)
class Formatter:
    """Indentation and block helpers bound to a single configuration."""

    config: FormattingConfig = field(default_factory=FormattingConfig)

    def newline(self) -> str:
        return self.config.newline

    def double_newline(self) -> str:
        return self.config.double_newline

    def indent_token(self) -> str:
        return self.config.indent

    def lines(self, *rows: str) -> str:
        """Join ``rows`` with the newline token."""

        return join(self.config.newline, rows)

    def paragraphs(self, *sections: str) -> str:
        """Join ``sections`` with an empty line between each of them."""

        return join(self.config.double_newline, sections)

    def indent(self, *rows: str, steps: int = 1) -> str:
        """Indent ``rows`` by ``steps`` levels.

        The rows are first joined with the newline token. Every line break
        inside the result, either ``\\n`` or ``\\r\\n``, is then replaced by the
        newline token followed by the indent token, and one indent token is
        prepended. With ``steps == 0`` the joined text is returned unchanged.

        Only ``\\n`` and ``\\r\\n`` are recognised as line breaks. With a lone
        ``"\\r"`` newline token the first step still indents every line, but
        later steps only indent the start of the text, because the ``"\\r"``
        tokens emitted by the first step are not matched again.

        Raises
        ------
        PreconditionViolationError
            If ``steps`` is negative.
        """

        if steps < 0:
            raise PreconditionViolationError(f"indentation steps must not be negative, got {steps}")

        text = self.lines(*rows)
        for _ in range(steps):
            text = self._indent_once(text)
        return text

    def block(self, *rows: str | Iterable[str]) -> str:
        """Indent ``rows`` one level and wrap them in a pair of braces.

        ``rows`` may be given as separate arguments or as a single iterable,
        which is consumed completely.
        """

        if len(rows) == 1 and _is_row_sequence(rows[0]):
            rows = tuple(rows[0])  # type: ignore[arg-type]

        newline = self.config.newline
        return "{" + newline + self.indent(*rows) + newline + "}"

    def _indent_once(self, text: str) -> str:
        replacement = self.config.newline + self.config.indent
        return self.config.indent + _LINE_BREAK.sub(lambda _match: replacement, text)


_config = FormattingConfig()


def current_config() -> FormattingConfig:
    """Return the process-wide configuration."""

    return _config


def set_config(config: FormattingConfig) -> None:
    """Replace the process-wide configuration.

    Text returned before the change is unaffected; only later calls observe
    the new tokens.
    """

    global _config
    LOGGER.debug("Formatting configuration changed: newline=%r indent=%r", config.newline, config.indent)
    _config = config


def reset_config() -> None:
    """Restore the default line feed and tab tokens."""

    set_config(FormattingConfig())


def current_newline() -> str:
    return _config.newline


def set_newline(token: str) -> None:
    set_config(_config.with_newline(token))


def double_newline() -> str:
    return _config.double_newline


def current_indent_token() -> str:
    return _config.indent


def set_indent_token(token: str) -> None:
    set_config(_config.with_indent(token))


def formatter() -> Formatter:
    """Return a :class:`Formatter` bound to the current configuration."""

    return Formatter(_config)


def lines(*rows: str) -> str:
    return formatter().lines(*rows)


def paragraphs(*sections: str) -> str:
    return formatter().paragraphs(*sections)


def indent(*rows: str, steps: int = 1) -> str:
    """Indent ``rows`` using the process-wide tokens. See :meth:`Formatter.indent`."""

    return formatter().indent(*rows, steps=steps)


def block(*rows: str | Iterable[str]) -> str:
    """Wrap ``rows`` in braces using the process-wide tokens. See :meth:`Formatter.block`."""

    return formatter().block(*rows)
