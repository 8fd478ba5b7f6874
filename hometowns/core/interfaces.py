"""Abstract interfaces.

The loader talks to presentation only through Renderer, so the pipeline can
be driven and tested without a web framework.
"""

from abc import ABC, abstractmethod

from hometowns.core.types import RegionGroups


class Renderer(ABC):
    """Presentation port consumed by HometownLoader.

    Each call replaces whatever was shown before.
    """

    @abstractmethod
    def show_loading(self) -> None:
        """Present a loading indicator."""
        ...

    @abstractmethod
    def show_regions(self, regions: RegionGroups) -> None:
        """Present players grouped by region, in the given key order."""
        ...

    @abstractmethod
    def show_error(self, message: str) -> None:
        """Present an error message with a way to retry."""
        ...
