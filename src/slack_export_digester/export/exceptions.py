"""Slackエクスポート読み込みに関する例外"""

from pathlib import Path


class ExportError(Exception):
    """エクスポート処理のエラーの基底クラス"""


class ExportFormatError(ExportError, ValueError):
    """エクスポートのJSONファイルが不正な場合のエラー"""

    def __init__(self, path: Path, detail: str) -> None:
        """初期化

        Args:
            path: 不正だったファイルのパス
            detail: JSONデコード・スキーマ検証のエラー内容
        """
        super().__init__(f"Invalid export file {path}: {detail}")
        self.path = path


class MessageDigestError(ExportError):
    """decode_failure_policyがabort_batchのとき、メッセージの変換に失敗した場合のエラー"""

    def __init__(self, channel_id: str, ts: str) -> None:
        """初期化

        Args:
            channel_id: 変換に失敗したメッセージのチャンネルID
            ts: 変換に失敗したメッセージのタイムスタンプ
        """
        super().__init__(f"Failed to digest message {ts} in channel {channel_id}")
        self.channel_id = channel_id
        self.ts = ts
