"""Base entity class for all domain entities."""

from dataclasses import asdict, dataclass
from typing import Any, Self


@dataclass
class BaseEntity:
    """Base class for all entities; dicts are the cached form."""

    def to_dict(self) -> dict[str, Any]:
        """Convert entity to a JSON-ready dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Rebuild an entity from ``to_dict`` output."""
        return cls(**data)
