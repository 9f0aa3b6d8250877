# app/core/errors.py


class RosterParseError(ValueError):
    """A single roster line or field could not be parsed."""


class RosterFileError(Exception):
    """A roster file could not be opened or read."""

    def __init__(self, path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{reason}: {self.path}")
