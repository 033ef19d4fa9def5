"""Slack Web API呼び出しに関する例外"""


class SlackError(Exception):
    """Slack連携のエラーの基底クラス"""


class SlackAPIError(SlackError):
    """Slack APIが ok: false を返した場合のエラー"""

    def __init__(self, method: str, error_code: str) -> None:
        """初期化

        Args:
            method: 呼び出したAPIメソッド名（例: users.list）
            error_code: Slack APIから返されたエラーコード
        """
        super().__init__(f"Slack API {method} failed: {error_code}")
        self.method = method
        self.error_code = error_code
