from __future__ import annotations


class TurnbotError(Exception):
    """Base class for errors raised by turnbot itself."""


class DispatchPreconditionError(TurnbotError, ValueError):
    """The caller handed ``run`` something it cannot dispatch."""


class MissingContextError(DispatchPreconditionError):
    def __init__(self) -> None:
        super().__init__("Missing TurnContext parameter")


class MissingActivityError(DispatchPreconditionError):
    def __init__(self) -> None:
        super().__init__("TurnContext does not include an activity")


class MissingActivityTypeError(DispatchPreconditionError):
    def __init__(self) -> None:
        super().__init__("Activity is missing its type")


class RegistryFrozenError(TurnbotError, RuntimeError):
    def __init__(self, label: str) -> None:
        super().__init__(f"Cannot bind a handler to {label!r}: dispatch has already started")
        self.label = label


class UnknownEventLabelError(TurnbotError, ValueError):
    def __init__(self, label: object) -> None:
        super().__init__(f"Unknown event label: {label!r}")
        self.label = label
