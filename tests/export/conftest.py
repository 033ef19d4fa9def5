"""エクスポートのテスト用フィクスチャ"""

import json
from pathlib import Path

import pytest

USERS = [
    {"id": "U1", "name": "alice", "profile": {"real_name": "Alice", "display_name": "alice"}},
    {"id": "U2", "name": "bob", "deleted": True},
]

CHANNELS = [
    {"id": "C1", "name": "general", "topic": {"value": "雑談"}, "purpose": {"value": ""}},
]

GENERAL_2024_01_01 = [
    {
        "user": "U1",
        "ts": "1704067200.000100",
        "text": "*hello* <@U2>",
        "blocks": [
            {
                "type": "rich_text",
                "elements": [
                    {
                        "type": "rich_text_section",
                        "elements": [
                            {"type": "text", "text": "hello", "style": {"bold": True}},
                            {"type": "text", "text": " "},
                            {"type": "user", "user_id": "U2"},
                        ],
                    }
                ],
            }
        ],
    },
]

GENERAL_2024_01_02 = [
    {
        "bot_id": "B1",
        "username": "deploybot",
        "ts": "1704153600.000200",
        "text": "deployed",
        "thread_ts": "1704067200.000100",
        "parent_user_id": "U1",
    },
    {"subtype": "channel_join", "ts": "1704153700.000300", "text": "joined"},
]


@pytest.fixture
def export_dir(tmp_path: Path) -> Path:
    """展開済みエクスポートのディレクトリを作成する"""
    (tmp_path / "users.json").write_text(json.dumps(USERS))
    (tmp_path / "channels.json").write_text(json.dumps(CHANNELS, ensure_ascii=False), encoding="utf-8")

    general = tmp_path / "general"
    general.mkdir()
    (general / "2024-01-02.json").write_text(json.dumps(GENERAL_2024_01_02))
    (general / "2024-01-01.json").write_text(json.dumps(GENERAL_2024_01_01))
    (general / "canvas_in_the_conversation.json").write_text(json.dumps({"title": "canvas"}))
    return tmp_path
