"""Slackエクスポートのファイル形式の型定義"""

from typing import Any, Literal

from pydantic import BaseModel, Field

# abort_batch: 1件でも変換に失敗したら全体を中断する
# skip_message: 失敗したメッセージだけを除外して続行する
DecodeFailurePolicy = Literal["abort_batch", "skip_message"]


class ExportProfile(BaseModel, frozen=True):
    real_name: str = ""
    display_name: str = ""
    email: str = ""
    image_192: str = ""


class ExportUser(BaseModel, frozen=True):
    """users.json の1ユーザー"""

    id: str
    name: str
    profile: ExportProfile = Field(default_factory=ExportProfile)
    deleted: bool = False
    is_bot: bool = False


class ExportTextValue(BaseModel, frozen=True):
    value: str = ""


class ExportChannel(BaseModel, frozen=True):
    """channels.json の1チャンネル"""

    id: str
    name: str
    topic: ExportTextValue = Field(default_factory=ExportTextValue)
    purpose: ExportTextValue = Field(default_factory=ExportTextValue)


class ExportMessage(BaseModel, frozen=True):
    """チャンネルディレクトリ内の日別JSONファイルの1メッセージ"""

    ts: str
    user: str = ""
    bot_id: str = ""
    username: str = ""  # botの表示名
    text: str = ""
    thread_ts: str = ""
    parent_user_id: str = ""
    blocks: list[Any] | None = None  # 変換時にdecode_blocksでデコードする

    @property
    def author_id(self) -> str:
        """投稿者のID（ユーザーIDがなければbot_id）"""
        return self.user or self.bot_id
