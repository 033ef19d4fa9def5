"""展開済みSlackエクスポートの読み込み"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import TypeVar

from pydantic import TypeAdapter, ValidationError

from slack_export_digester.export.exceptions import ExportFormatError
from slack_export_digester.export.models import ExportChannel, ExportMessage, ExportUser

logger = logging.getLogger(__name__)

USERS_FILE = "users.json"
CHANNELS_FILE = "channels.json"
# チャンネルディレクトリに置かれるがメッセージ配列ではないファイル
CANVAS_FILE = "canvas_in_the_conversation.json"

T = TypeVar("T")

_USERS = TypeAdapter(list[ExportUser])
_CHANNELS = TypeAdapter(list[ExportChannel])
_MESSAGES = TypeAdapter(list[ExportMessage])


def _load_list(path: Path, adapter: TypeAdapter[list[T]]) -> list[T]:
    if not path.exists():
        msg = f"Export file not found: {path}"
        raise FileNotFoundError(msg)

    try:
        return adapter.validate_json(path.read_bytes())
    except ValidationError as e:
        raise ExportFormatError(path, str(e)) from e


def load_users(export_dir: Path) -> list[ExportUser]:
    """users.json を読み込む

    Raises:
        FileNotFoundError: users.json が存在しない場合
        ExportFormatError: JSONが不正な場合
    """
    return _load_list(export_dir / USERS_FILE, _USERS)


def load_channels(export_dir: Path) -> list[ExportChannel]:
    """channels.json を読み込む

    Raises:
        FileNotFoundError: channels.json が存在しない場合
        ExportFormatError: JSONが不正な場合
    """
    return _load_list(export_dir / CHANNELS_FILE, _CHANNELS)


def iter_channel_messages(export_dir: Path, channel: ExportChannel) -> Iterator[ExportMessage]:
    """チャンネルディレクトリ内の日別JSONファイルからメッセージを順に返す

    ファイル名（日付）順に読み込み、canvasファイルは読み飛ばす。

    Args:
        export_dir: 展開済みエクスポートのルートディレクトリ
        channel: 対象チャンネル

    Yields:
        ExportMessage

    Raises:
        FileNotFoundError: チャンネルディレクトリが存在しない場合
        ExportFormatError: JSONが不正な場合
    """
    channel_dir = export_dir / channel.name
    if not channel_dir.is_dir():
        msg = f"Channel directory not found: {channel_dir}"
        raise FileNotFoundError(msg)

    for path in sorted(channel_dir.glob("*.json")):
        if path.name == CANVAS_FILE:
            logger.debug("Skipping canvas file: %s", path)
            continue
        yield from _load_list(path, _MESSAGES)
