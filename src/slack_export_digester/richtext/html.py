"""Markdown→HTML変換

Markdownパーサーの差し替え時に変更箇所を限定するため、変換はMarkdownConverterに集約する。
"""

from collections.abc import Iterable, Sequence
from typing import Any, Protocol, runtime_checkable

from markdown_it import MarkdownIt
from markdown_it.token import Token

from slack_export_digester.richtext.models import Block
from slack_export_digester.richtext.renderer import RenderContext, RenderResult, render_markdown


@runtime_checkable
class MarkdownConverter(Protocol):
    """Markdown文字列をHTML文字列に変換するProtocol"""

    def convert(self, markdown: str) -> str: ...


def _render_link_open_in_new_tab(self: Any, tokens: Sequence[Token], idx: int, options: Any, env: Any) -> str:
    tokens[idx].attrSet("target", "_blank")
    return self.renderToken(tokens, idx, options, env)


class MarkdownItConverter:
    """markdown-it-py を用いた MarkdownConverter 実装"""

    def __init__(self, open_links_in_new_tab: bool = True) -> None:
        """CommonMark + テーブル・取り消し線・自動リンクで初期化する

        メンションの<span>を通すため生HTMLを許可する。
        """
        self._md = MarkdownIt("commonmark", {"html": True, "linkify": True}).enable(
            ["table", "strikethrough", "linkify"]
        )
        if open_links_in_new_tab:
            self._md.add_render_rule("link_open", _render_link_open_in_new_tab)

    def convert(self, markdown: str) -> str:
        """MarkdownテキストをHTMLに変換する

        Args:
            markdown: Markdown形式のテキスト

        Returns:
            HTML文字列
        """
        return self._md.render(markdown)


def render_html(blocks: Iterable[Block], ctx: RenderContext, converter: MarkdownConverter) -> RenderResult:
    """ブロック列をMarkdown経由でHTMLに変換する

    Args:
        blocks: デコード済みのブロック列
        ctx: ユーザー・チャンネルのディレクトリ等
        converter: Markdown→HTML変換器

    Returns:
        HTMLとレンダリング中の警告を持つRenderResult
    """
    markdown = render_markdown(blocks, ctx)
    return RenderResult(converter.convert(markdown.text), markdown.warnings)
