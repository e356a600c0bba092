"""Application state owned by the presentation coordinator."""

from dataclasses import dataclass, field

from fuel_finder.domain.models.geo import Coordinates
from fuel_finder.domain.models.station import Station

PHASE_IDLE = "idle"
PHASE_LOADING = "loading"
PHASE_DISPLAYING = "displaying"
PHASE_ERROR = "error"

REFERENCE_USER_LOCATION = "user_location"
REFERENCE_SEARCH_CENTER = "search_center"


@dataclass(frozen=True)
class ReferencePoint:
    """The point station distances are measured from."""

    source: str  # REFERENCE_USER_LOCATION or REFERENCE_SEARCH_CENTER
    coordinates: Coordinates


@dataclass(frozen=True)
class FinderMessage:
    """A user-visible status or error message."""

    kind: str
    text: str


@dataclass
class FinderState:
    """Mutable state of one fuel finder session."""

    phase: str = PHASE_IDLE
    stations: tuple[Station, ...] = ()
    search_center: Coordinates | None = None
    user_location: Coordinates | None = None
    reference_point: ReferencePoint | None = None
    highway_filter: str = ""  # Empty means no filter
    nearest_station_id: str | None = None
    message: FinderMessage | None = None
    last_outcome: str | None = None
    last_query: str = ""
    configured_highways: list[str] = field(default_factory=list)
