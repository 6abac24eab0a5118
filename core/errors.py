"""
Exception taxonomy for the session engine.

Only precondition and contract failures are errors. A wrong word, a blank
grid cell or a stray keystroke is a normal state handled by the sessions.
"""


class TrainerError(Exception):
    """Base class for all trainer errors."""


class EmptyDatasetError(TrainerError):
    """Raised when a round is started before any data is available."""

    def __init__(self, dataset: str):
        super().__init__(f"No {dataset} loaded; cannot start a round")
        self.dataset = dataset


class MalformedEntryError(TrainerError):
    """Raised when a conjugation answer grid is not rectangular or is empty."""

    def __init__(self, verb: str, reason: str):
        super().__init__(f"Malformed conjugation entry '{verb}': {reason}")
        self.verb = verb
        self.reason = reason


class SessionStateError(TrainerError):
    """Raised when a command arrives in a state that does not accept it."""
