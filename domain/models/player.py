"""
Player domain model.
"""

from collections.abc import Hashable, Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Player:
    """
    Represents a rated player on the roster.

    This is a pure domain model with no infrastructure dependencies.
    Balancing only reads ``power``; the name fields are display payload.
    """

    id: Hashable
    firstname: str = ""
    lastname: str = ""
    power: float = 0.0

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Player":
        """
        Build a player from an ``{id, firstname, lastname, power}`` record.

        Args:
            record: Mapping as supplied by the roster store

        Returns:
            Player with power coerced to float
        """
        return cls(
            id=record["id"],
            firstname=record.get("firstname", ""),
            lastname=record.get("lastname", ""),
            power=float(record["power"]),
        )

    def get_value(self) -> float:
        """Player value for team balancing."""
        return self.power

    @property
    def display_name(self) -> str:
        return f"{self.firstname} {self.lastname}".strip()

    def __str__(self) -> str:
        return f"{self.display_name} (Power: {self.power:g})"
