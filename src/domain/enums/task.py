"""Task-related enumerations.

These enums are used by the Task aggregate for status and priority tracking.
Both parse case-insensitively from their names, which is how they travel on
the wire (``"High"``, ``"InProgress"``...).
"""

from enum import Enum

from domain.exceptions import DomainValidationError


class TaskStatus(str, Enum):
    """Status values for Task aggregate."""

    TODO = "Todo"
    IN_PROGRESS = "InProgress"
    DONE = "Done"
    CANCELLED = "Cancelled"

    @property
    def is_active(self) -> bool:
        """A task is active while it is neither done nor cancelled."""
        return self not in (TaskStatus.DONE, TaskStatus.CANCELLED)

    @classmethod
    def from_name(cls, name: str | None) -> "TaskStatus":
        """Parse a status name (case-insensitive)."""
        if name is None or not name.strip():
            raise DomainValidationError("status", "The 'status' value cannot be empty.")
        normalized = name.strip().lower()
        for member in cls:
            if member.value.lower() == normalized:
                return member
        valid = ", ".join(member.value for member in cls)
        raise DomainValidationError("status", f"Invalid status name: '{name}'. Valid values are: {valid}.")


class TaskPriority(str, Enum):
    """Priority levels for Task aggregate, ordered by urgency."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"

    @property
    def ordinal(self) -> int:
        """Urgency rank, 1 (Low) to 4 (Critical)."""
        return _PRIORITY_ORDINALS[self]

    @classmethod
    def from_name(cls, name: str | None) -> "TaskPriority":
        """Parse a priority name (case-insensitive, surrounding whitespace ignored).

        Raises:
            DomainValidationError: on blank input or an unknown name
        """
        if name is None or not name.strip():
            raise DomainValidationError("priority", "The 'priority' value cannot be empty.")
        normalized = name.strip().lower()
        for member in cls:
            if member.value.lower() == normalized:
                return member
        raise DomainValidationError("priority", f"Invalid priority name: '{name}'. Valid values are: Low, Medium, High, Critical.")

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "TaskPriority":
        """Map 1..4 to Low..Critical."""
        for member, rank in _PRIORITY_ORDINALS.items():
            if rank == ordinal:
                return member
        raise DomainValidationError("priority", f"Invalid priority value: {ordinal}. Must be between 1 and 4.")

    # str's lexical ordering would put "Critical" before "Low"
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TaskPriority):
            return NotImplemented
        return self.ordinal < other.ordinal

    def __le__(self, other: object) -> bool:
        if not isinstance(other, TaskPriority):
            return NotImplemented
        return self.ordinal <= other.ordinal

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, TaskPriority):
            return NotImplemented
        return self.ordinal > other.ordinal

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, TaskPriority):
            return NotImplemented
        return self.ordinal >= other.ordinal


_PRIORITY_ORDINALS: dict[TaskPriority, int] = {
    TaskPriority.LOW: 1,
    TaskPriority.MEDIUM: 2,
    TaskPriority.HIGH: 3,
    TaskPriority.CRITICAL: 4,
}
