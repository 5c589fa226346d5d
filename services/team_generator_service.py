"""
Team generation orchestration.

Takes a roster, picks the selected players and hands them to the shuffler.
"""

import logging
from collections.abc import Hashable, Iterable
from dataclasses import dataclass

from config import POWER_DIFFERENCE_DECIMALS
from domain.models.player import Player
from domain.models.team import Team
from domain.services.team_balancing_service import TeamBalancingService
from services import error_codes
from services.result import Result
from shuffler import BalancedShuffler, InvalidInput

logger = logging.getLogger("team_generator.services.team_generator")


@dataclass(frozen=True)
class Matchup:
    """Two generated teams with their totals."""

    team_a: Team
    team_b: Team
    team_a_power: float
    team_b_power: float
    power_difference: float  # Full precision
    power_difference_display: str  # Rounded for display


class TeamGeneratorService:
    """Selects players from a roster and splits them into balanced teams."""

    def __init__(
        self,
        players: Iterable[Player],
        shuffler: BalancedShuffler | None = None,
        balancing_service: TeamBalancingService | None = None,
    ):
        self._players = tuple(players)
        self.shuffler = shuffler or BalancedShuffler()
        self.balancing_service = balancing_service or TeamBalancingService(
            display_decimals=POWER_DIFFERENCE_DECIMALS
        )

    def get_players(self) -> tuple[Player, ...]:
        return self._players

    def get_player(self, player_id: Hashable) -> Result[Player]:
        for player in self._players:
            if player.id == player_id:
                return Result.ok(player)
        return Result.fail(f"Player {player_id!r} not found", code=error_codes.PLAYER_NOT_FOUND)

    def select_players(self, selected_ids: Iterable[Hashable]) -> list[Player]:
        """
        Return the selected roster members in roster order.

        Selection order does not matter; ids not on the roster are skipped.
        """
        wanted = set(selected_ids)
        selected = [p for p in self._players if p.id in wanted]

        if len(selected) < len(wanted):
            known = {p.id for p in selected}
            logger.warning(f"Ignoring unknown player ids: {sorted(map(repr, wanted - known))}")

        return selected

    def generate_teams(self, selected_ids: Iterable[Hashable]) -> Result[Matchup]:
        """
        Split the selected players into two balanced teams.

        Args:
            selected_ids: Ids of the players taking part

        Returns:
            Result.ok(Matchup) on success
            Result.fail(error, code) if the selection cannot be split
        """
        selected = self.select_players(selected_ids)

        if len(selected) < 2:
            return Result.fail(
                "Please select at least 2 players", code=error_codes.INSUFFICIENT_PLAYERS
            )
        if len(selected) % 2 != 0:
            return Result.fail(
                "Please select an even number of players", code=error_codes.UNEVEN_PLAYER_COUNT
            )

        try:
            outcome = self.shuffler.balance_with_outcome(selected)
        except InvalidInput as exc:
            logger.warning(f"Team generation rejected: {exc}")
            return Result.fail(str(exc), code=error_codes.VALIDATION_ERROR)

        team_a, team_b = outcome.team_a, outcome.team_b
        team_a_power = self.balancing_service.calculate_team_value(team_a)
        team_b_power = self.balancing_service.calculate_team_value(team_b)
        difference = self.balancing_service.calculate_power_difference(team_a, team_b)

        logger.info(
            f"Generated teams for {len(selected)} players: "
            f"{team_a_power:g} vs {team_b_power:g} (diff {difference:g})"
        )
        logger.debug(
            f"Seed diff {outcome.seed_difference:g}, "
            f"{outcome.swaps} swap(s) over {outcome.passes} pass(es)"
        )

        return Result.ok(
            Matchup(
                team_a=team_a,
                team_b=team_b,
                team_a_power=team_a_power,
                team_b_power=team_b_power,
                power_difference=difference,
                power_difference_display=self.balancing_service.format_power_difference(
                    team_a, team_b
                ),
            )
        )

    def get_roster_stats(self) -> dict:
        """
        Summarize the roster.

        Returns:
            Dict with "count" and "average_power" (display string, or None
            for an empty roster)
        """
        return {
            "count": len(self._players),
            "average_power": self.balancing_service.format_average_value(list(self._players)),
        }
