"""
Balanced team shuffling algorithm.

Splits an even-sized batch of players into two equal-sized teams whose total
power is as close as possible. The search is a deterministic heuristic:

1. Greedy seed: walk the players by power (descending, stable) and give each
   one to the lighter team while it still has room.
2. Local search: repeatedly try every (team A, team B) single-player swap and
   apply any swap that strictly shrinks the power gap, until a full pass
   finds none.

Only single swaps are considered, so the result is a local optimum of that
neighborhood and can miss a split that needs a multi-player exchange.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass

from config import LOCAL_SEARCH_MAX_PASSES
from domain.models.player import Player
from domain.models.team import Team


class InvalidInput(ValueError):
    """Raised when a batch of players cannot be split into two equal teams."""


@dataclass(frozen=True)
class BalanceOutcome:
    """Result of a balance run, with search diagnostics."""

    team_a: Team
    team_b: Team
    seed_difference: float  # Power gap after the greedy seed
    difference: float  # Power gap after local search
    passes: int  # Local-search passes run, including the final quiet pass
    swaps: int  # Improving swaps applied


class BalancedShuffler:
    """
    Implements balanced two-team splitting.

    The shuffler is stateless between calls: every call works on private
    index arrays over a sorted copy of the input and returns new Team objects.
    """

    def __init__(self, max_passes: int | None = None):
        """
        Initialize the shuffler.

        Args:
            max_passes: Cap on local-search passes (0 = run to convergence).
                Defaults to LOCAL_SEARCH_MAX_PASSES.
        """
        self.max_passes = (
            max_passes if max_passes is not None else LOCAL_SEARCH_MAX_PASSES
        )

    def _validate(self, players: Sequence[Player]) -> None:
        if len(players) < 2:
            raise InvalidInput("need at least two entities")
        if len(players) % 2 != 0:
            raise InvalidInput("need an even number of entities")
        for player in players:
            if not math.isfinite(player.get_value()):
                raise InvalidInput(
                    f"power must be a finite number, got {player.get_value()!r} for {player.id!r}"
                )

    def _greedy_seed(
        self, values: list[float], team_size: int
    ) -> tuple[list[int], list[int], float, float]:
        """
        Assign sorted values to the lighter team, respecting the size cap.

        Args:
            values: Player values, already sorted descending
            team_size: Players per team

        Returns:
            Tuple of (team_a_slots, team_b_slots, power_a, power_b), where slots
            are indices into ``values``
        """
        team_a: list[int] = []
        team_b: list[int] = []
        power_a = 0
        power_b = 0

        for index, value in enumerate(values):
            # Once B is full everything left goes to A, and vice versa
            if len(team_a) < team_size and (power_a <= power_b or len(team_b) >= team_size):
                team_a.append(index)
                power_a += value
            else:
                team_b.append(index)
                power_b += value

        return team_a, team_b, power_a, power_b

    def _local_search(
        self,
        values: list[float],
        team_a: list[int],
        team_b: list[int],
        power_a: float,
        power_b: float,
    ) -> tuple[float, float, int, int]:
        """
        Hill-climb over single-player swaps, mutating the slot lists in place.

        Swaps are applied as soon as they are found, so later pairs in the same
        pass see the updated teams and sums.

        Returns:
            Tuple of (power_a, power_b, passes, swaps)
        """
        passes = 0
        swaps = 0
        improved = True

        while improved:
            if self.max_passes and passes >= self.max_passes:
                break
            improved = False
            passes += 1

            for i in range(len(team_a)):
                for j in range(len(team_b)):
                    current_diff = abs(power_a - power_b)
                    value_a = values[team_a[i]]
                    value_b = values[team_b[j]]
                    new_power_a = power_a - value_a + value_b
                    new_power_b = power_b - value_b + value_a
                    new_diff = abs(new_power_a - new_power_b)

                    if new_diff < current_diff:
                        team_a[i], team_b[j] = team_b[j], team_a[i]
                        power_a = new_power_a
                        power_b = new_power_b
                        swaps += 1
                        improved = True

        return power_a, power_b, passes, swaps

    def balance_with_outcome(self, players: Sequence[Player]) -> BalanceOutcome:
        """
        Split players into two balanced teams and report how the search went.

        Args:
            players: Even number (at least 2) of players

        Returns:
            BalanceOutcome with both teams and search diagnostics

        Raises:
            InvalidInput: On fewer than two players, an odd count, or a
                non-finite power value
        """
        self._validate(players)

        # sorted() is stable with reverse=True: equal powers keep input order
        ordered = sorted(players, key=lambda p: p.get_value(), reverse=True)
        values = [p.get_value() for p in ordered]
        team_size = len(ordered) // 2

        slots_a, slots_b, power_a, power_b = self._greedy_seed(values, team_size)
        seed_difference = abs(power_a - power_b)

        power_a, power_b, passes, swaps = self._local_search(
            values, slots_a, slots_b, power_a, power_b
        )

        # Team A keeps its slot order; team B is the rest in sorted order
        in_team_a = set(slots_a)
        team_a = Team(ordered[index] for index in slots_a)
        team_b = Team(player for index, player in enumerate(ordered) if index not in in_team_a)

        return BalanceOutcome(
            team_a=team_a,
            team_b=team_b,
            seed_difference=seed_difference,
            difference=abs(power_a - power_b),
            passes=passes,
            swaps=swaps,
        )

    def balance(self, players: Sequence[Player]) -> tuple[Team, Team]:
        """
        Split players into two balanced teams.

        Args:
            players: Even number (at least 2) of players

        Returns:
            Tuple of (team_a, team_b)
        """
        outcome = self.balance_with_outcome(players)
        return outcome.team_a, outcome.team_b


def balance(players: Sequence[Player]) -> tuple[Team, Team]:
    """Split players into two balanced teams with default settings."""
    return BalancedShuffler().balance(players)
