"""NHL provider constants."""

NHL_API_BASE = "https://api-web.nhle.com/v1"

# Relay takes the target URL as a URL-encoded query parameter value
DEFAULT_RELAY_URL = "https://api.allorigins.win/raw?url="

# Team logo assets, used when a roster payload carries no teamLogo
NHL_LOGO_URL = "https://assets.nhle.com/logos/nhl/svg/{abbrev}_light.svg"

# Roster position groups, in the order players are returned
ROSTER_GROUPS = ("forwards", "defensemen", "goalies")

REQUEST_HEADERS = {
    "Accept": "application/json",
    "X-Requested-With": "XMLHttpRequest",
}
