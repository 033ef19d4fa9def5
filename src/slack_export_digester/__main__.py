import asyncio
import logging
import sys
from pathlib import Path

from slack_sdk.web.async_client import AsyncWebClient

from slack_export_digester.config import Config, load_config
from slack_export_digester.export import (
    MessageDigestError,
    MessageRenderer,
    digest_channel,
    iter_channel_messages,
    load_channels,
    load_users,
)
from slack_export_digester.richtext import MarkdownItConverter, RenderContext
from slack_export_digester.slack import Directory, SlackClient

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_user_directory(config: Config) -> Directory:
    """ユーザーディレクトリを構築する（トークンがあればWeb API、なければusers.json）"""
    if config.slack_bot_token:
        slack_client = SlackClient(AsyncWebClient(token=config.slack_bot_token))
        return asyncio.run(slack_client.fetch_user_directory())
    return Directory.from_users(load_users(Path(config.slack_export_dir)))


def run(config: Config) -> int:
    """全チャンネルのメッセージを変換してJSON Linesに書き出す

    Returns:
        int: 書き出したメッセージ数

    Raises:
        MessageDigestError: decode_failure_policyがabort_batchで変換に失敗した場合
    """
    export_dir = Path(config.slack_export_dir)
    channels = load_channels(export_dir)
    users = build_user_directory(config)
    logger.info("Directory loaded: %d users, %d channels", len(users), len(channels))

    ctx = RenderContext(
        users=users,
        channels=Directory.from_channels(channels) if config.resolve_channel_names else None,
        max_depth=config.max_depth,
    )
    renderer = MessageRenderer(ctx, MarkdownItConverter(open_links_in_new_tab=config.open_links_in_new_tab))

    output_path = Path(config.output_path)
    # 出力先は全チャンネル成功時にのみ置き換わる。中断時は一時ファイルを削除する
    tmp_path = output_path.with_name(output_path.name + ".tmp")

    written = 0
    try:
        with tmp_path.open("w", encoding="utf-8") as out:
            for channel in channels:
                result = digest_channel(
                    channel,
                    iter_channel_messages(export_dir, channel),
                    renderer,
                    policy=config.decode_failure_policy,
                )
                for message in result.messages:
                    out.write(message.model_dump_json() + "\n")
                written += len(result.messages)
                logger.info(
                    "#%s: rendered=%d, skipped=%d, failed=%d, warnings=%d",
                    channel.name,
                    result.rendered_count,
                    result.skipped_count,
                    result.failed_count,
                    result.warning_count,
                )
        tmp_path.replace(output_path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise

    logger.info("Wrote %d messages to %s", written, config.output_path)
    return written


def main() -> None:
    """アプリケーションのエントリーポイント"""
    config = load_config(Path("config.yaml"))
    logger.info(
        "Config loaded: export_dir=%s, decode_failure_policy=%s",
        config.slack_export_dir,
        config.decode_failure_policy,
    )

    try:
        run(config)
    except MessageDigestError as e:
        logger.error("Aborted: %s (%s)", e, e.__cause__)
        sys.exit(1)


if __name__ == "__main__":
    main()
