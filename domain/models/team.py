"""
Team domain model.
"""

from collections.abc import Iterable, Iterator

from domain.models.player import Player


class Team:
    """
    Represents one side of a balanced split.

    Teams are immutable: the player sequence is captured as a tuple on
    construction, so callers can never reach the balancer's working arrays.
    """

    def __init__(self, players: Iterable[Player]):
        """
        Initialize a team.

        Args:
            players: Players in display order
        """
        self._players = tuple(players)

    @property
    def players(self) -> tuple[Player, ...]:
        return self._players

    @property
    def player_ids(self) -> list:
        return [p.id for p in self._players]

    def get_team_value(self) -> float:
        """
        Calculate total team power.

        Returns:
            Sum of all player values, accumulated in team order
        """
        total_value = 0
        for player in self._players:
            total_value += player.get_value()
        return total_value

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[Player]:
        return iter(self._players)

    def __contains__(self, player: object) -> bool:
        return player in self._players

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Team):
            return NotImplemented
        return self._players == other._players

    def __hash__(self) -> int:
        return hash(self._players)

    def __repr__(self) -> str:
        return f"Team({list(self._players)!r})"

    def __str__(self) -> str:
        player_names = ", ".join(p.display_name for p in self._players)
        return f"Team: {player_names}"
