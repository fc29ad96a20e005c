import json

import pytest
from typer.testing import CliRunner

from turnbot.cli import app
from turnbot.config import Settings

runner = CliRunner()


def test_send_message():
    result = runner.invoke(app, ["send", "--type", "message", "--text", "hello"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload == {"replies": ["You said 'hello'"], "result": None}


def test_send_token_response_event():
    result = runner.invoke(app, ["send", "--type", "event", "--name", "tokens/response"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["result"] == {"status": 200, "body": None}


def test_route_prints_label_path():
    result = runner.invoke(
        app,
        ["route", "--type", "conversationUpdate", "--member-added", "a", "--member-removed", "b"],
    )
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == ["Turn", "ConversationUpdate", "MembersAdded", "Dialog"]


def test_replay_file(tmp_path):
    path = tmp_path / "activities.json"
    path.write_text(
        json.dumps(
            [
                {"type": "conversationUpdate", "membersAdded": [{"id": "alice"}], "recipient": {"id": "bot"}},
                {"type": "message", "text": "hi", "from": {"id": "alice"}},
            ]
        ),
        encoding="utf-8",
    )
    result = runner.invoke(app, ["replay", str(path)])
    assert result.exit_code == 0, result.output
    transcript = json.loads(result.stdout)
    assert [t["type"] for t in transcript] == ["conversationUpdate", "message"]
    assert transcript[1]["replies"] == ["You said 'hi'"]


def test_replay_rejects_activity_without_type(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps([{"text": "no type"}]), encoding="utf-8")
    result = runner.invoke(app, ["replay", str(path)])
    assert result.exit_code != 0


def test_settings_validate_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert Settings().LOG_LEVEL == "DEBUG"
    with pytest.raises(ValueError):
        Settings(LOG_LEVEL="chatty")


def test_replay_accepts_null_membership_lists(tmp_path):
    path = tmp_path / "activities.json"
    path.write_text(
        json.dumps(
            [
                {
                    "type": "conversationUpdate",
                    "membersAdded": None,
                    "membersRemoved": [{"id": "bob"}],
                    "recipient": {"id": "bot"},
                }
            ]
        ),
        encoding="utf-8",
    )
    result = runner.invoke(app, ["replay", str(path)])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)[0]["replies"] == ["[conversationUpdate event detected]"]
