"""
Progress status enumerations for list items.
Values are the canonical strings stored in the database and sent over the API.
"""

from enum import Enum


class AssemblyStatus(str, Enum):
    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    ASSEMBLED = "Assembled"


class PaintingStatus(str, Enum):
    UNPAINTED = "Unpainted"
    PRIMED = "Primed"
    BASE_COATED = "Base Coated"
    DETAILED = "Detailed"
    FINISHED = "Finished"


def enum_values(enum_cls: type[Enum]) -> list[str]:
    """Stored values for an enum column (the strings, not the member names)."""
    return [member.value for member in enum_cls]
