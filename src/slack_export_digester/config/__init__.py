"""設定（環境変数 + config.yaml）の読み込み"""

from slack_export_digester.config.app import AppConfig, load_app_config
from slack_export_digester.config.config import Config, load_config
from slack_export_digester.config.env import EnvConfig, load_env_config

__all__ = [
    "AppConfig",
    "Config",
    "EnvConfig",
    "load_app_config",
    "load_config",
    "load_env_config",
]
