"""アプリケーション設定"""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from slack_export_digester.export.models import DecodeFailurePolicy


class AppConfig(BaseModel):
    """アプリケーション設定"""

    decode_failure_policy: DecodeFailurePolicy = Field(
        default="skip_message", description="blocksの変換に失敗したメッセージの扱い"
    )
    max_depth: int = Field(default=32, ge=1, description="リッチテキスト要素のネストの上限")
    open_links_in_new_tab: bool = Field(default=True, description="リンクにtarget=_blankを付ける")
    resolve_channel_names: bool = Field(default=True, description="チャンネルメンションをチャンネル名で表示する")
    output_path: str = Field(default="digested.jsonl", description="変換結果の出力先（JSON Lines）")

    model_config = {"extra": "forbid"}


def load_app_config(config_path: Path) -> AppConfig:
    """YAMLファイルからAppConfigを読み込む

    Args:
        config_path: 設定ファイルのパス

    Returns:
        AppConfig: アプリケーション設定

    Raises:
        FileNotFoundError: 設定ファイルが存在しない場合
        ValueError: 設定ファイルが不正な場合
    """
    if not config_path.exists():
        msg = f"Config file not found: {config_path}"
        raise FileNotFoundError(msg)

    try:
        with config_path.open() as f:
            data = yaml.safe_load(f)
            if data is None:
                data = {}
            if not isinstance(data, dict):
                msg = f"Config file must be a mapping: {config_path}"
                raise ValueError(msg)
            return AppConfig(**data)
    except yaml.YAMLError as e:
        msg = f"Invalid YAML file: {e}"
        raise ValueError(msg) from e
    except ValidationError as e:
        msg = f"Invalid configuration: {e}"
        raise ValueError(msg) from e
