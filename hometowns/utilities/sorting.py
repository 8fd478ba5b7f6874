"""Locale-aware sort keys for display labels."""

from unidecode import unidecode


def region_sort_key(label: str) -> tuple[str, str]:
    """Generate sort key for region labels.

    Compares accent- and case-insensitively first, so "Québec" sorts with
    "Quebec" and "alberta" next to "Alberta". The raw label breaks ties to
    keep the order total.
    """
    return (unidecode(label).casefold(), label)
