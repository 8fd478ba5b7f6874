"""HTML rendering of load cycle states.

Plain string templating with escaping; each show_* call replaces the
whole page.
"""

from html import escape

from hometowns.core import Player, RegionGroups, Renderer

PAGE_TITLE = "Tonight's NHL Players by Hometown"

_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
</head>
<body>
<h1>{title}</h1>
<div class="regions-container">
{body}
</div>
</body>
</html>
"""


def _player_card(player: Player) -> str:
    number = (
        f'<span class="player-number">#{player.number}</span>' if player.number is not None else ""
    )
    position = (
        f'<p class="player-position">{escape(player.position)}</p>' if player.position else ""
    )
    logo = (
        f'<img class="team-logo" src="{escape(player.team_logo)}" '
        f'alt="{escape(player.team_abbrev)}">'
        if player.team_logo
        else ""
    )
    return (
        '<div class="player-card">'
        f'<div class="player-card-header">{logo}{number}</div>'
        '<div class="player-card-content">'
        f'<h3 class="player-name">{escape(player.name)}</h3>'
        f'<p class="player-hometown">{escape(player.hometown)}</p>'
        f"{position}"
        "</div></div>"
    )


class HtmlRenderer(Renderer):
    """Renders the page into `markup`, the latest full HTML document."""

    def __init__(self, retry_action: str = "/retry"):
        self._retry_action = retry_action
        self.markup = self._page('<p class="idle">Nothing loaded yet.</p>')

    def _page(self, body: str) -> str:
        return _PAGE.format(title=escape(PAGE_TITLE), body=body)

    def show_loading(self) -> None:
        self.markup = self._page('<div class="loading">Loading players...</div>')

    def show_regions(self, regions: RegionGroups) -> None:
        if not regions:
            self.markup = self._page('<p class="empty">No games scheduled today.</p>')
            return

        sections = []
        for region, players in regions.items():
            cards = "".join(_player_card(p) for p in players)
            sections.append(
                '<div class="region">'
                f'<h2 class="region-title">{escape(region)} '
                f'<span class="player-count">({len(players)})</span></h2>'
                f'<div class="players-grid">{cards}</div>'
                "</div>"
            )
        self.markup = self._page("\n".join(sections))

    def show_error(self, message: str) -> None:
        self.markup = self._page(
            '<div class="error-message">'
            f"<p>Error loading data: {escape(message)}</p>"
            f'<form method="post" action="{escape(self._retry_action)}">'
            '<button type="submit" class="retry-button">Retry</button>'
            "</form></div>"
        )
