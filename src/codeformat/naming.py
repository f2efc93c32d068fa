"""Helpers for taking fully qualified type names apart."""

from __future__ import annotations

__all__ = [
    "SOURCE_EXTENSION",
    "file_name_to_type_name",
    "package_name",
    "short_name",
    "strip_generics",
    "type_name_to_file_name",
]

SOURCE_EXTENSION = ".java"

_NESTED_SEPARATOR = "$"
_PATH_SEPARATORS = ("/", "\\")


def strip_generics(class_name: str) -> str:
    """Remove the generic parameters and array markers from ``class_name``.

    ``"Map<K, V>[]"`` becomes ``"Map"``. The name is truncated at the first
    ``<`` and the remainder is then truncated at the first ``[``.
    """

    name = class_name.partition("<")[0]
    return name.partition("[")[0]


def short_name(long_name: str) -> str:
    """Return everything after the last dot of ``long_name``.

    Nested type separators (``$``) count as dots. Dots inside generic
    parameters are ignored when searching, but the parameters themselves are
    kept, so ``"java.util.Map<java.lang.String, V>"`` gives
    ``"Map<java.lang.String, V>"``. Names without a dot are returned as is.
    """

    normalized = long_name.replace(_NESTED_SEPARATOR, ".")
    if "." not in normalized:
        return normalized
    return normalized[strip_generics(normalized).rfind(".") + 1 :]


def package_name(long_name: str) -> str | None:
    """Return everything before the last dot, or ``None`` if there is no dot."""

    package, separator, _ = long_name.rpartition(".")
    if not separator:
        return None
    return package


def file_name_to_type_name(file_name: str, *, extension: str = SOURCE_EXTENSION) -> str | None:
    """Convert a source file path into a dotted type name.

    ``"com/example/Foo.java"`` becomes ``"com.example.Foo"``. Both forward and
    backward slashes are treated as path separators. Returns ``None`` when
    ``file_name`` does not end with ``extension``.
    """

    if not file_name.endswith(extension):
        return None

    type_name = file_name[: len(file_name) - len(extension)]
    for separator in _PATH_SEPARATORS:
        type_name = type_name.replace(separator, ".")
    return type_name


def type_name_to_file_name(long_name: str, *, extension: str = SOURCE_EXTENSION) -> str:
    """Return the relative source path for ``long_name``."""

    return long_name.replace(".", "/") + extension
