"""
Application services layer.

Services orchestrate team generation using the domain models and shuffler.
"""

from services.player_validation import sort_roster, validate_player_form
from services.result import Result
from services.team_generator_service import Matchup, TeamGeneratorService

__all__ = [
    "Matchup",
    "Result",
    "TeamGeneratorService",
    "sort_roster",
    "validate_player_form",
]
