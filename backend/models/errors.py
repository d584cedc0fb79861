"""Error taxonomy for game operations.

ValidationError: the input itself is malformed (unknown category, bad index).
StateError: the input is fine but not allowed in the session's current state.
NotFoundError: no session with the requested id.
"""


class YatzyError(Exception):
    message = "Game error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.message
        super().__init__(self.message)


class ValidationError(YatzyError):
    message = "Invalid input"


class StateError(YatzyError):
    message = "Action not allowed right now"


class NotFoundError(YatzyError):
    message = "Not found"


class InvalidIndex(ValidationError):
    message = "Invalid index"


class InvalidCategory(ValidationError):
    message = "Invalid category"


class NoRollsLeft(StateError):
    message = "No rolls left this turn"


class GameFinished(StateError):
    message = "Game already finished"


class IllegalBeforeRoll(StateError):
    message = "Roll the dice first"


class CategoryAlreadyScored(StateError):
    message = "Category already scored"


class GameNotFound(NotFoundError):
    message = "Game not found"
