"""Slackリッチテキスト→Markdown→HTML変換モジュール"""

from slack_export_digester.richtext.exceptions import (
    RenderDepthExceededError,
    RichTextDecodeError,
    RichTextError,
    UnrecognizedStyleShapeError,
)
from slack_export_digester.richtext.html import MarkdownConverter, MarkdownItConverter, render_html
from slack_export_digester.richtext.models import Block, Element, ListStyle, Style, TextStyle, decode_blocks, decode_style
from slack_export_digester.richtext.renderer import RenderContext, RenderResult, render_element, render_markdown

__all__ = [
    "Block",
    "Element",
    "ListStyle",
    "MarkdownConverter",
    "MarkdownItConverter",
    "RenderContext",
    "RenderDepthExceededError",
    "RenderResult",
    "RichTextDecodeError",
    "RichTextError",
    "Style",
    "TextStyle",
    "UnrecognizedStyleShapeError",
    "decode_blocks",
    "decode_style",
    "render_element",
    "render_html",
    "render_markdown",
]
