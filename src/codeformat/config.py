"""Immutable configuration shared by the formatting helpers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_NEWLINE = "\n"
DEFAULT_INDENT = "\t"


class FormattingConfig(BaseModel):
    """Newline and indentation tokens used when generating code.

    Attributes
    ----------
    newline:
        The character sequence emitted for a line break. Defaults to a single
        line feed.
    indent:
        The character sequence inserted once per indentation level. Defaults to
        a single horizontal tab.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    newline: str = Field(DEFAULT_NEWLINE, min_length=1, description="Token emitted for a line break.")
    indent: str = Field(DEFAULT_INDENT, min_length=1, description="Token inserted once per indentation level.")

    @property
    def double_newline(self) -> str:
        """Return the newline token repeated twice, used between paragraphs."""

        return self.newline * 2

    def with_newline(self, token: str) -> "FormattingConfig":
        """Return a copy of this configuration using ``token`` as newline."""

        return FormattingConfig(newline=token, indent=self.indent)

    def with_indent(self, token: str) -> "FormattingConfig":
        """Return a copy of this configuration using ``token`` as indent."""

        return FormattingConfig(newline=self.newline, indent=token)


__all__ = ["DEFAULT_INDENT", "DEFAULT_NEWLINE", "FormattingConfig"]
