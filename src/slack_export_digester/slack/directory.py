"""IDから表示名を引く読み取り専用ディレクトリ"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from slack_export_digester.export.models import ExportChannel, ExportUser


class Directory(Mapping[str, str]):
    """ID → 表示名の不変マッピング

    レンダリング開始前に全件を構築し、参照渡しで共有する。
    """

    def __init__(self, names: Mapping[str, str] | None = None) -> None:
        self._names = MappingProxyType(dict(names or {}))

    def __getitem__(self, key: str) -> str:
        return self._names[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"Directory({len(self)} entries)"

    @classmethod
    def from_users(cls, users: Iterable[ExportUser]) -> Directory:
        """ユーザー一覧からユーザーID → ユーザー名のディレクトリを作る"""
        return cls({user.id: user.name for user in users})

    @classmethod
    def from_channels(cls, channels: Iterable[ExportChannel]) -> Directory:
        """チャンネル一覧からチャンネルID → チャンネル名のディレクトリを作る"""
        return cls({channel.id: channel.name for channel in channels})
