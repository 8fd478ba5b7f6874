"""Season string helpers.

The NHL identifies a season by its two calendar years run together,
e.g. "20242025" for the season starting in fall 2024.
"""

import re
from datetime import date

# Month in which the next season's rosters take over
SEASON_ROLLOVER_MONTH = 7

_SEASON_PATTERN = re.compile(r"(\d{4})(\d{4})")


def current_season(today: date | None = None) -> str:
    """Get the season string for a date.

    July onward belongs to the season starting that year.

    Examples:
        >>> current_season(date(2024, 10, 15))
        '20242025'
        >>> current_season(date(2025, 3, 1))
        '20242025'
    """
    today = today or date.today()
    start = today.year if today.month >= SEASON_ROLLOVER_MONTH else today.year - 1
    return f"{start}{start + 1}"


def validate_season(season: str) -> str:
    """Check a season string is two consecutive 4-digit years.

    Raises:
        ValueError: If the string is malformed
    """
    match = _SEASON_PATTERN.fullmatch(season or "")
    if not match or int(match.group(2)) != int(match.group(1)) + 1:
        raise ValueError(f"Invalid season '{season}' - expected e.g. '20242025'")
    return season
