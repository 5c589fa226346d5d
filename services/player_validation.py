"""
Player form validation.

Checks a roster entry before it is stored: both names present after trimming
and a power rating inside the configured range.
"""

import math
from collections.abc import Iterable

from config import POWER_MAX, POWER_MIN
from domain.models.player import Player
from services import error_codes
from services.result import Result


def _format_bound(value: float) -> str:
    return f"{value:g}"


def validate_player_form(
    firstname: str | None,
    lastname: str | None,
    power: str | float | None,
    power_min: float | None = None,
    power_max: float | None = None,
) -> Result[dict]:
    """
    Validate the fields of a player form.

    Args:
        firstname: First name as entered
        lastname: Last name as entered
        power: Power rating, as text or a number. Text must parse whole with
            float(); trailing junk such as "12abc" is rejected, not truncated.
        power_min: Lowest accepted power (defaults to config.POWER_MIN)
        power_max: Highest accepted power (defaults to config.POWER_MAX)

    Returns:
        Result.ok({"firstname", "lastname", "power"}) with trimmed names and
        float power, or Result.fail(message, code)

    Examples:
        >>> validate_player_form("  Ada ", "Lovelace", "87.5").value
        {'firstname': 'Ada', 'lastname': 'Lovelace', 'power': 87.5}

        >>> validate_player_form("Ada", "Lovelace", "150").error_code
        'invalid_power'
    """
    if power_min is None:
        power_min = POWER_MIN
    if power_max is None:
        power_max = POWER_MAX

    firstname = (firstname or "").strip()
    lastname = (lastname or "").strip()
    if isinstance(power, str):
        power = power.strip()

    if not firstname or not lastname or power is None or power == "":
        return Result.fail("Please fill in all fields", code=error_codes.VALIDATION_ERROR)

    invalid_power = Result.fail(
        f"Power must be a number between {_format_bound(power_min)} and {_format_bound(power_max)}",
        code=error_codes.INVALID_POWER,
    )
    try:
        power_value = float(power)
    except (TypeError, ValueError):
        return invalid_power

    if not math.isfinite(power_value) or power_value < power_min or power_value > power_max:
        return invalid_power

    return Result.ok({"firstname": firstname, "lastname": lastname, "power": power_value})


def sort_roster(players: Iterable[Player]) -> list[Player]:
    """Order players by first name for listing, ignoring case."""
    return sorted(players, key=lambda p: p.firstname.casefold())
