"""
Per-field validation results.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Valid:
    """The field satisfied every constraint."""

    @property
    def message(self) -> None:
        return None


@dataclass(frozen=True)
class Invalid:
    """The field failed a constraint; ``message`` is shown to the user."""

    message: str


FieldResult = Valid | Invalid
