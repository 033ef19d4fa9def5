"""Slack関連モジュール"""

from slack_export_digester.slack.client import SlackClient
from slack_export_digester.slack.directory import Directory
from slack_export_digester.slack.exceptions import SlackAPIError, SlackError

__all__ = [
    "Directory",
    "SlackAPIError",
    "SlackClient",
    "SlackError",
]
