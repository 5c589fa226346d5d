"""
Team balancing domain service.

Handles team power totals, power differences and their display rounding.
"""

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal, localcontext

from domain.models.player import Player
from domain.models.team import Team


def total_power(players: Iterable[Player]) -> float:
    """Sum of player power, accumulated in the given order."""
    return Team(players).get_team_value()


def power_difference(team_a: Iterable[Player], team_b: Iterable[Player]) -> float:
    """Absolute difference of the two team totals (full precision)."""
    return abs(total_power(team_a) - total_power(team_b))


def round_for_display(value: float, decimals: int = 1) -> str:
    """
    Format a number with a fixed number of decimals, rounding half up.

    Rounds the exact binary value of ``value``, matching the fixed-point
    formatting the roster UI has always shown (0.25 -> "0.3", 0.35 -> "0.3"
    because 0.35 is stored as 0.34999...).

    Args:
        value: Number to format
        decimals: Digits after the decimal point

    Returns:
        Formatted string
    """
    quantum = Decimal(1).scaleb(-decimals)
    with localcontext() as ctx:
        ctx.prec = 64
        return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


class TeamBalancingService:
    """
    Pure domain service for team balancing metrics.

    Responsibilities:
    - Calculate team values
    - Measure the power gap between two teams
    - Produce display-rounded figures

    All sums go through Team.get_team_value(), so totals, gaps and averages
    agree to the last bit.
    """

    def __init__(self, display_decimals: int = 1):
        """
        Initialize team balancing service.

        Args:
            display_decimals: Digits kept when formatting differences and averages
        """
        self.display_decimals = display_decimals

    def calculate_team_value(self, team: Team) -> float:
        """
        Calculate total team power.

        Args:
            team: Team to evaluate

        Returns:
            Team value
        """
        return team.get_team_value()

    def calculate_power_difference(self, team1: Team, team2: Team) -> float:
        """
        Calculate the absolute power gap between two teams.

        Internal comparisons always use this full-precision value; use
        format_power_difference() for display.
        """
        return abs(self.calculate_team_value(team1) - self.calculate_team_value(team2))

    def format_power_difference(self, team1: Team, team2: Team) -> str:
        """Power difference rounded for display."""
        return round_for_display(
            self.calculate_power_difference(team1, team2), self.display_decimals
        )

    def calculate_average_value(self, players: list[Player]) -> float | None:
        """
        Calculate average player value.

        Args:
            players: List of players

        Returns:
            Average player value, or None for an empty list
        """
        if not players:
            return None

        return total_power(players) / len(players)

    def format_average_value(self, players: list[Player]) -> str | None:
        """Average player value rounded for display, or None for an empty list."""
        average = self.calculate_average_value(players)
        if average is None:
            return None
        return round_for_display(average, self.display_decimals)
