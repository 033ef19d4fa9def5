"""Slackエクスポート読み込み・変換モジュール"""

from slack_export_digester.export.digester import (
    DigestedMessage,
    DigestResult,
    MessageRenderer,
    digest_channel,
)
from slack_export_digester.export.exceptions import ExportError, ExportFormatError, MessageDigestError
from slack_export_digester.export.loader import iter_channel_messages, load_channels, load_users
from slack_export_digester.export.models import DecodeFailurePolicy, ExportChannel, ExportMessage, ExportUser

__all__ = [
    "DecodeFailurePolicy",
    "DigestResult",
    "DigestedMessage",
    "ExportChannel",
    "ExportError",
    "ExportFormatError",
    "ExportMessage",
    "ExportUser",
    "MessageDigestError",
    "MessageRenderer",
    "digest_channel",
    "iter_channel_messages",
    "load_channels",
    "load_users",
]
