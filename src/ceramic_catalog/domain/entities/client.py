"""Client entity.

Clients are the customers collections can be made exclusive to. Each
client belongs to one or more regions and departments; those labels drive
EXCLUSIVE_GROUP visibility and the relationship matrix.
"""

from dataclasses import dataclass, field
from typing import Iterable


def normalize_labels(labels: Iterable[str] | None) -> list[str]:
    """Strip labels, drop blanks and duplicates, keep first-seen order.

    Args:
        labels: Raw region or department labels.

    Returns:
        Cleaned list with set semantics.
    """
    seen: dict[str, None] = {}
    for label in labels or []:
        cleaned = label.strip()
        if cleaned:
            seen.setdefault(cleaned, None)
    return list(seen)


@dataclass
class Client:
    """Client entity.

    Attributes:
        id: Unique identifier (UUID string).
        code: Unique short client code.
        name: Display name.
        regions: Region labels, unique, in insertion order.
        departments: Department labels, unique, in insertion order.
    """

    id: str
    code: str
    name: str
    regions: list[str] = field(default_factory=list)
    departments: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate client data after initialization."""
        if not self.id:
            raise ValueError("Client ID is required")
        if not self.code:
            raise ValueError("Client code is required")
        if not self.name:
            raise ValueError("Client name is required")
        self.regions = normalize_labels(self.regions)
        self.departments = normalize_labels(self.departments)

    @property
    def display_name(self) -> str:
        """Label used for this client inside relationship matrix cells."""
        return f"{self.name} ({self.code})"
