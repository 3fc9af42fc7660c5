"""
File header comments for generated output.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

CommentStyle = Literal["block", "line"]


class FileHeader(BaseModel):
    """Header placed at the top of generated files."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    tool_name: str = Field(alias="toolName")
    tool_version: str = Field(alias="toolVersion")
    include_timestamp: bool = Field(default=False, alias="includeTimestamp")
    custom_lines: list[str] = Field(default_factory=list, alias="customLines")


def header_lines(header: FileHeader, now: datetime | None = None) -> list[str]:
    """Build the header text lines.

    The timestamp line is only added when ``include_timestamp`` is set, so
    output stays reproducible by default.
    """
    lines = [
        f"Generated by {header.tool_name} v{header.tool_version}",
        "Do not edit directly - regenerate from the design system source.",
    ]
    if header.include_timestamp:
        stamp = (now or datetime.now(UTC)).isoformat(timespec="seconds")
        lines.append(f"Generated at {stamp}")
    lines.extend(header.custom_lines)
    return lines


def format_header_comment(lines: list[str], style: CommentStyle = "block") -> str:
    """Wrap lines in a comment.

    ``block`` produces a ``/* ... */`` comment (CSS); ``line`` produces
    ``//`` comments (JS/TS, SCSS).
    """
    if style == "line":
        return "\n".join(f"// {line}" if line else "//" for line in lines)

    body = [f" * {line}" if line else " *" for line in lines]
    return "\n".join(["/*", *body, " */"])
