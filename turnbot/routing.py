"""Classification tree that decides which label follows which.

Each label owns an ordered list of routes. When a label's chain is exhausted
the first route whose predicate accepts the activity names the next label.
``Dialog`` has no routes and ends every path.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from turnbot.domain import TOKEN_RESPONSE_EVENT_NAME, ActivityTypes, EventLabel

Predicate = Callable[[Any], bool]


@dataclass(frozen=True)
class Route:
    target: EventLabel
    predicate: Predicate


def _always(activity: Any) -> bool:
    return True


def _type_is(activity_type: ActivityTypes) -> Predicate:
    def check(activity: Any) -> bool:
        return activity.type == activity_type.value

    check.__name__ = f"type_is_{activity_type.value}"
    return check


def _has_members_added(activity: Any) -> bool:
    return bool(getattr(activity, "members_added", None))


def _has_members_removed(activity: Any) -> bool:
    return bool(getattr(activity, "members_removed", None))


def _is_token_response(activity: Any) -> bool:
    return getattr(activity, "name", None) == TOKEN_RESPONSE_EVENT_NAME


_TO_DIALOG = (Route(EventLabel.DIALOG, _always),)

ROUTES: dict[EventLabel, tuple[Route, ...]] = {
    EventLabel.TURN: (
        Route(EventLabel.MESSAGE, _type_is(ActivityTypes.MESSAGE)),
        Route(EventLabel.CONVERSATION_UPDATE, _type_is(ActivityTypes.CONVERSATION_UPDATE)),
        Route(EventLabel.EVENT, _type_is(ActivityTypes.EVENT)),
        Route(EventLabel.UNRECOGNIZED_ACTIVITY_TYPE, _always),
    ),
    EventLabel.MESSAGE: _TO_DIALOG,
    EventLabel.CONVERSATION_UPDATE: (
        Route(EventLabel.MEMBERS_ADDED, _has_members_added),
        Route(EventLabel.MEMBERS_REMOVED, _has_members_removed),
        Route(EventLabel.DIALOG, _always),
    ),
    EventLabel.MEMBERS_ADDED: _TO_DIALOG,
    EventLabel.MEMBERS_REMOVED: _TO_DIALOG,
    EventLabel.EVENT: (
        Route(EventLabel.TOKEN_RESPONSE_EVENT, _is_token_response),
        Route(EventLabel.DIALOG, _always),
    ),
    EventLabel.TOKEN_RESPONSE_EVENT: _TO_DIALOG,
    EventLabel.UNRECOGNIZED_ACTIVITY_TYPE: _TO_DIALOG,
    EventLabel.DIALOG: (),
}


def next_label(label: EventLabel, activity: Any) -> EventLabel | None:
    """Return the child of ``label`` selected for ``activity``, or None at the end."""
    for route in ROUTES[label]:
        if route.predicate(activity):
            return route.target
    return None


def path_for(activity: Any) -> list[EventLabel]:
    """Full label path an activity takes when every handler continues."""
    path: list[EventLabel] = []
    label: EventLabel | None = EventLabel.TURN
    while label is not None:
        path.append(label)
        label = next_label(label, activity)
    return path
