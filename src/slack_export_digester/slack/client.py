"""Slack Web APIからディレクトリを取得するクライアントクラス"""

import logging

from slack_sdk.web.async_client import AsyncWebClient

from slack_export_digester.export.models import ExportUser
from slack_export_digester.slack.directory import Directory
from slack_export_digester.slack.exceptions import SlackAPIError

logger = logging.getLogger(__name__)


class SlackClient:
    """Slack API操作を担当するクライアントクラス"""

    def __init__(self, client: AsyncWebClient) -> None:
        """依存注入でAsyncWebClientを受け取る"""
        self._client = client

    async def fetch_users(self, limit: int = 200) -> list[ExportUser]:
        """users.list をカーソルで最後までページングして全ユーザーを取得する

        Args:
            limit: 1ページあたりの取得件数

        Returns:
            list[ExportUser]: ワークスペースの全ユーザー

        Raises:
            SlackAPIError: Slack API呼び出しでエラーが発生した場合
        """
        users: list[ExportUser] = []
        cursor: str | None = None

        while True:
            response = await self._client.users_list(cursor=cursor, limit=limit)
            if not response.get("ok"):
                raise SlackAPIError("users.list", response.get("error", "unknown_error"))

            users.extend(ExportUser.model_validate(member) for member in response["members"])

            # 最終ページではnext_cursorが空文字になる
            cursor = response.get("response_metadata", {}).get("next_cursor")
            if not cursor:
                break

        logger.info("Fetched %d users from Slack API", len(users))
        return users

    async def fetch_user_directory(self) -> Directory:
        """全ユーザーからユーザーID → ユーザー名のディレクトリを作る"""
        return Directory.from_users(await self.fetch_users())
