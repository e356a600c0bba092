"""List rendering surface port."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from fuel_finder.domain.models.finder_state import FinderMessage
from fuel_finder.domain.models.station import Station


class ListSurface(ABC):
    """Port for the station list, loading indicator and status messages."""

    @abstractmethod
    def render_stations(self, stations: Sequence[Station], nearest: Station | None) -> None:
        """Replace the list content with the given stations."""
        ...

    @abstractmethod
    def set_loading(self, visible: bool) -> None:
        """Show or hide the loading indicator."""
        ...

    @abstractmethod
    def show_message(self, message: FinderMessage | None) -> None:
        """Show a status message, or clear it when ``None``."""
        ...
