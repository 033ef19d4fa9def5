"""エクスポートのメッセージをHTML本文に変換するパイプライン"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from pydantic import BaseModel

from slack_export_digester.export.exceptions import MessageDigestError
from slack_export_digester.export.models import DecodeFailurePolicy, ExportChannel, ExportMessage
from slack_export_digester.richtext import (
    MarkdownConverter,
    RenderContext,
    RenderResult,
    RichTextError,
    decode_blocks,
    render_html,
)
from slack_export_digester.richtext.models import RICH_TEXT_BLOCK

logger = logging.getLogger(__name__)


class DigestedMessage(BaseModel, frozen=True):
    """HTML本文に変換済みのメッセージ"""

    channel_id: str
    user_id: str
    ts: str
    thread_ts: str | None = None
    parent_user_id: str | None = None
    body_html: str


@dataclass
class DigestResult:
    """digest_channelの結果"""

    messages: list[DigestedMessage] = field(default_factory=list)
    rendered_count: int = 0
    skipped_count: int = 0  # 投稿者のないメッセージ
    failed_count: int = 0  # skip_messageで除外したメッセージ
    warning_count: int = 0


class MessageRenderer:
    """1メッセージのblocksをデコードしてHTMLに変換する"""

    def __init__(self, ctx: RenderContext, converter: MarkdownConverter) -> None:
        """依存注入でディレクトリとMarkdown変換器を受け取る"""
        self._ctx = ctx
        self._converter = converter

    def render_message(self, message: ExportMessage) -> RenderResult:
        """メッセージ本文をHTMLに変換する

        rich_textブロックを持たないメッセージ（botのsection/actionsのみ等）は
        textをMarkdownとして変換する。
        レンダリング中の警告はログに出力したうえで結果にも含める。

        Raises:
            RichTextError: blocksのデコードまたはレンダリングに失敗した場合
        """
        blocks = decode_blocks(message.blocks) if message.blocks else []
        if not any(block.type == RICH_TEXT_BLOCK for block in blocks):
            return RenderResult(self._converter.convert(message.text))

        result = render_html(blocks, self._ctx, self._converter)
        for warning in result.warnings:
            logger.warning("%s (ts=%s)", warning, message.ts)
        return result


def digest_channel(
    channel: ExportChannel,
    messages: Iterable[ExportMessage],
    renderer: MessageRenderer,
    policy: DecodeFailurePolicy = "skip_message",
) -> DigestResult:
    """チャンネルのメッセージを順にHTML本文へ変換する

    Args:
        channel: 対象チャンネル
        messages: チャンネルのメッセージ
        renderer: メッセージ変換器
        policy: 変換に失敗したメッセージの扱い

    Returns:
        DigestResult

    Raises:
        MessageDigestError: policyがabort_batchで変換に失敗した場合
    """
    result = DigestResult()

    for message in messages:
        if not message.author_id:
            result.skipped_count += 1
            continue

        try:
            rendered = renderer.render_message(message)
        except RichTextError as e:
            if policy == "abort_batch":
                raise MessageDigestError(channel.id, message.ts) from e
            logger.error("Skipping message %s in #%s: %s", message.ts, channel.name, e)
            result.failed_count += 1
            continue

        result.messages.append(
            DigestedMessage(
                channel_id=channel.id,
                user_id=message.author_id,
                ts=message.ts,
                thread_ts=message.thread_ts or None,
                parent_user_id=message.parent_user_id or None,
                body_html=rendered.text,
            )
        )
        result.rendered_count += 1
        result.warning_count += len(rendered.warnings)

    return result
