from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

import typer
from pydantic import TypeAdapter, ValidationError

from turnbot.adapters.memory import InMemoryAdapter
from turnbot.bots import EchoBot
from turnbot.config import Settings, load_settings
from turnbot.domain import Activity, ChannelAccount, ConversationAccount
from turnbot.errors import DispatchPreconditionError
from turnbot.logging_setup import setup_logging
from turnbot.routing import path_for

app = typer.Typer(help="TurnBot - route activities through handler chains")

_activities_adapter = TypeAdapter(list[Activity])


def _build_activity(
    settings: Settings,
    *,
    activity_type: str,
    text: str | None,
    name: str | None,
    members_added: list[str] | None,
    members_removed: list[str] | None,
) -> Activity:
    return Activity(
        type=activity_type,
        id="in-1",
        channel_id=settings.CHANNEL_ID,
        from_property=ChannelAccount(id=settings.USER_ID),
        recipient=ChannelAccount(id=settings.BOT_ID, name=settings.BOT_NAME),
        conversation=ConversationAccount(id=settings.CONVERSATION_ID),
        text=text,
        name=name,
        members_added=[ChannelAccount(id=m) for m in members_added or []],
        members_removed=[ChannelAccount(id=m) for m in members_removed or []],
    )


def _dispatch(bot: EchoBot, adapter: InMemoryAdapter, activity: Activity) -> Any:
    try:
        return asyncio.run(adapter.process_activity(activity, bot.run))
    except DispatchPreconditionError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _dump_result(result: Any) -> Any:
    if hasattr(result, "model_dump"):
        return result.model_dump(mode="json")
    return result


@app.callback()
def main(json_logs: bool = typer.Option(False, "--json-logs", help="Enable JSON logs")):
    settings = load_settings()
    setup_logging(json_logs=json_logs or settings.LOG_JSON, level=settings.LOG_LEVEL)


@app.command()
def send(
    activity_type: str = typer.Option("message", "--type", help="Activity type, e.g. message|conversationUpdate|event"),
    text: str | None = typer.Option(None, "--text"),
    name: str | None = typer.Option(None, "--name", help="Event name, e.g. tokens/response"),
    member_added: list[str] | None = typer.Option(None, "--member-added"),
    member_removed: list[str] | None = typer.Option(None, "--member-removed"),
):
    """Dispatch one activity to the echo bot and print its replies."""
    settings = load_settings()
    activity = _build_activity(
        settings,
        activity_type=activity_type,
        text=text,
        name=name,
        members_added=member_added,
        members_removed=member_removed,
    )
    adapter = InMemoryAdapter()
    result = _dispatch(EchoBot(settings), adapter, activity)
    typer.echo(
        json.dumps(
            {"replies": adapter.transcript(), "result": _dump_result(result)},
            indent=2,
            ensure_ascii=False,
        )
    )


@app.command()
def route(
    activity_type: str = typer.Option("message", "--type"),
    name: str | None = typer.Option(None, "--name"),
    member_added: list[str] | None = typer.Option(None, "--member-added"),
    member_removed: list[str] | None = typer.Option(None, "--member-removed"),
):
    """Print the labels an activity passes through."""
    settings = load_settings()
    activity = _build_activity(
        settings,
        activity_type=activity_type,
        text=None,
        name=name,
        members_added=member_added,
        members_removed=member_removed,
    )
    typer.echo(json.dumps([label.value for label in path_for(activity)]))


@app.command()
def replay(path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True)):
    """Dispatch every activity in a JSON array file, in order."""
    settings = load_settings()
    try:
        activities = _activities_adapter.validate_json(path.read_bytes())
    except ValidationError as exc:
        raise typer.BadParameter(f"{path} is not a list of activities: {exc}") from exc

    bot = EchoBot(settings)
    adapter = InMemoryAdapter()
    transcript: list[dict[str, Any]] = []
    for activity in activities:
        adapter.clear()
        result = _dispatch(bot, adapter, activity)
        transcript.append(
            {
                "type": activity.type,
                "replies": adapter.transcript(),
                "result": _dump_result(result),
            }
        )
    typer.echo(json.dumps(transcript, indent=2, ensure_ascii=False))
