"""
Domain services containing pure business logic.
"""

from domain.services.team_balancing_service import (
    TeamBalancingService,
    power_difference,
    round_for_display,
    total_power,
)

__all__ = ["TeamBalancingService", "power_difference", "round_for_display", "total_power"]
