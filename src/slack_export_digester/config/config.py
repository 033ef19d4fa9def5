"""統合Config クラス"""

from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from slack_export_digester.config.app import load_app_config
from slack_export_digester.config.env import load_env_config
from slack_export_digester.export.models import DecodeFailurePolicy


class Config(BaseModel):
    """統合設定クラス（環境変数 + アプリケーション設定）"""

    # 環境変数由来
    slack_export_dir: str = Field(..., description="展開済みSlackエクスポートのディレクトリ")
    slack_bot_token: str | None = Field(default=None, description="Slack Bot User OAuth Token (xoxb-)")

    # config.yaml由来
    decode_failure_policy: DecodeFailurePolicy = Field(default="skip_message")
    max_depth: int = Field(default=32, ge=1)
    open_links_in_new_tab: bool = Field(default=True)
    resolve_channel_names: bool = Field(default=True)
    output_path: str = Field(default="digested.jsonl")

    model_config = {"extra": "forbid"}


def load_config(config_path: Path) -> Config:
    """環境変数とYAMLファイルから統合設定を読み込む

    Args:
        config_path: YAMLファイルのパス

    Returns:
        Config: 統合設定

    Raises:
        ValueError: 必須の環境変数が欠けている場合
        FileNotFoundError: YAMLファイルが存在しない場合
    """
    # .envファイルを読み込み
    load_dotenv()

    env_config = load_env_config()
    app_config = load_app_config(config_path)

    return Config(**env_config.model_dump(), **app_config.model_dump())
