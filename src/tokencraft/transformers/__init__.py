"""
Transformers: render the IR into output formats.
"""

from .css import CssOptions, merge_css_options, selector_for_mode, to_css
from .header import CommentStyle, FileHeader, format_header_comment, header_lines

__all__ = [
    "CommentStyle",
    "CssOptions",
    "FileHeader",
    "format_header_comment",
    "header_lines",
    "merge_css_options",
    "selector_for_mode",
    "to_css",
]
