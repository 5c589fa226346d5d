"""
Standard error codes for the service layer.

Usage:
    from services import error_codes
    from services.result import Result

    return Result.fail("Please select an even number of players", code=error_codes.UNEVEN_PLAYER_COUNT)
"""

# General errors
VALIDATION_ERROR = "validation_error"

# Player record errors
PLAYER_NOT_FOUND = "player_not_found"
INVALID_POWER = "invalid_power"

# Team generation errors
INSUFFICIENT_PLAYERS = "insufficient_players"
UNEVEN_PLAYER_COUNT = "uneven_player_count"
