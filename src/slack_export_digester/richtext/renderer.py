"""リッチテキストツリー→Markdown変換

各レンダラーは純粋関数で、変換結果の文字列と警告をRenderResultとして返す。
ログ出力は呼び出し側の責務とする。
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from slack_export_digester.richtext.exceptions import RenderDepthExceededError
from slack_export_digester.richtext.models import (
    CHANNEL,
    EMOJI,
    LINK,
    LIST,
    PREFORMATTED,
    QUOTE,
    RICH_TEXT_BLOCK,
    SECTION,
    TEXT,
    USER,
    Block,
    Element,
    ListStyle,
)

DEFAULT_MAX_DEPTH = 32
INDENT_UNIT = "   "
UNKNOWN_USER = "unknown-user"
UNKNOWN_CHANNEL = "unknown-channel"


@dataclass(frozen=True)
class RenderResult:
    """レンダリング結果（文字列 + 非致命的な警告）"""

    text: str = ""
    warnings: tuple[str, ...] = ()

    def __add__(self, other: RenderResult) -> RenderResult:
        return RenderResult(self.text + other.text, self.warnings + other.warnings)

    @classmethod
    def join(cls, results: Iterable[RenderResult], sep: str = "") -> RenderResult:
        """複数の結果をsepで連結し、警告を出現順にまとめる"""
        results = list(results)
        warnings = tuple(w for r in results for w in r.warnings)
        return cls(sep.join(r.text for r in results), warnings)


@dataclass(frozen=True)
class RenderContext:
    """レンダリング中に参照する読み取り専用の情報"""

    users: Mapping[str, str] = field(default_factory=dict)
    channels: Mapping[str, str] | None = None  # Noneならチャンネル名を解決しない
    max_depth: int = DEFAULT_MAX_DEPTH


def _skipped(warning: str) -> RenderResult:
    return RenderResult("", (warning,))


def render_text(element: Element) -> RenderResult:
    """テキスト要素をインラインMarkdownに変換する。

    先頭・末尾の空白はマーカーの外側に残す。マーカーが空白に隣接すると
    Markdownパーサーが強調として解釈しないため。
    マーカーは bold → italic → strike → code の順に内側から重ねる。

    Args:
        element: typeが"text"の要素

    Returns:
        RenderResult（text以外やリストstyleの要素は空文字 + 警告）
    """
    if element.type != TEXT:
        return _skipped(f"Element is not text: {element.type}")

    style = element.style
    if isinstance(style, ListStyle):
        return _skipped("List style applied to text element")

    text = element.text
    if not text.strip():
        return RenderResult(text)

    core = text.lstrip(" ")
    leading = len(text) - len(core)
    core = core.rstrip(" ")
    trailing = len(text) - leading - len(core)

    if style.bold:
        core = f"**{core}**"
    if style.italic:
        core = f"*{core}*"
    if style.strike:
        core = f"~~{core}~~"
    if style.code:
        core = f"`{core}`"

    return RenderResult(" " * leading + core + " " * trailing)


def render_user(element: Element, users: Mapping[str, str]) -> RenderResult:
    """ユーザーメンションを@名前に変換する"""
    name = users.get(element.user_id)
    mention = f"@{name or UNKNOWN_USER}"
    return RenderResult(f'<span class="user-mention">{mention}</span>')


def render_channel(element: Element, channels: Mapping[str, str] | None = None) -> RenderResult:
    """チャンネルメンションを#名前に変換する

    チャンネル名を解決できない場合はチャンネルIDをそのまま使う。
    """
    label = element.channel_id or UNKNOWN_CHANNEL
    if channels is not None and element.channel_id in channels:
        label = channels[element.channel_id]
    return RenderResult(f'<span class="channel-mention">#{label}</span>')


def _render_children(element: Element, ctx: RenderContext, depth: int) -> RenderResult:
    return RenderResult.join(render_element(child, ctx, depth + 1) for child in element.elements)


def render_list(element: Element, ctx: RenderContext, depth: int = 0) -> RenderResult:
    """リスト要素を番号付き・箇条書きのMarkdownリストに変換する

    各項目にはインデント（indent × 3スペース）と引用マーカー（border × ">"）を付ける。
    borderがある場合は引用内でリストがまとまるよう項目ごとに空行を入れる。
    """
    style = element.style
    if not isinstance(style, ListStyle):
        return _skipped("Element is not a list")

    indent = INDENT_UNIT * element.indent
    border = ">" * element.border + " " if element.border else ""

    parts = [RenderResult("\n")]
    for number, child in enumerate(element.elements, start=1):
        item = render_element(child, ctx, depth + 1)
        marker = f"{number}. " if style.kind == "ordered" else "- "
        line = f"{border}{indent}{marker}{item.text}\n"
        if element.border:
            line += "\n"
        parts.append(RenderResult(line, item.warnings))

    return RenderResult.join(parts)


def render_quote(element: Element, ctx: RenderContext, depth: int = 0) -> RenderResult:
    """引用要素をMarkdownの引用ブロックに変換する"""
    content = _render_children(element, ctx, depth)
    quoted = "> " + content.text.replace("\n", "\n> ") + "\n\n"
    return RenderResult(quoted, content.warnings)


def render_preformatted(element: Element, ctx: RenderContext, depth: int = 0) -> RenderResult:
    """整形済み要素をコードフェンスで囲む

    コードブロック内のテキストにはstyleを適用しない。
    """
    parts = []
    for child in element.elements:
        if child.type == TEXT:
            parts.append(RenderResult(child.text))
        else:
            parts.append(render_element(child, ctx, depth + 1))
    content = RenderResult.join(parts)
    return RenderResult(f"```\n{content.text}\n```", content.warnings)


def render_element(element: Element, ctx: RenderContext, depth: int = 0) -> RenderResult:
    """要素のtypeタグに応じたレンダラーに振り分ける

    未知のtypeは空文字 + 警告として扱い、処理を継続する。

    Raises:
        RenderDepthExceededError: ネストがctx.max_depthを超えた場合
    """
    if depth > ctx.max_depth:
        raise RenderDepthExceededError(ctx.max_depth)

    if element.type == TEXT:
        return render_text(element)
    if element.type == EMOJI:
        return RenderResult(f":{element.name}:")
    if element.type == USER:
        return render_user(element, ctx.users)
    if element.type == CHANNEL:
        return render_channel(element, ctx.channels)
    if element.type == LINK:
        # 表示テキスト・URLともエスケープしない
        return RenderResult(f"[{element.text}]({element.url})")
    if element.type == SECTION:
        return _render_children(element, ctx, depth)
    if element.type == LIST:
        return render_list(element, ctx, depth)
    if element.type == QUOTE:
        return render_quote(element, ctx, depth)
    if element.type == PREFORMATTED:
        return render_preformatted(element, ctx, depth)

    return _skipped(f"Unknown element type: {element.type}")


def render_markdown(blocks: Iterable[Block], ctx: RenderContext) -> RenderResult:
    """ブロック列をMarkdown文字列に組み立てる

    ブロックごとに要素を連結し、ブロック間を空行で区切り、前後の空白を除去する。
    """
    rendered = []
    for block in blocks:
        if block.type != RICH_TEXT_BLOCK:
            rendered.append(_skipped(f"Unsupported block type: {block.type}"))
            continue
        rendered.append(RenderResult.join(render_element(element, ctx) for element in block.elements))

    markdown = RenderResult.join(rendered, sep="\n\n")
    return RenderResult(markdown.text.strip(), markdown.warnings)
