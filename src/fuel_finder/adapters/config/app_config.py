"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOCATION_SOURCES = ("ip", "fixed", "none")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=8000, description="Port to bind the server to")
    log_level: str = Field(default="INFO", description="Root log level")

    # External services
    nominatim_url: str = Field(
        default="https://nominatim.openstreetmap.org/search",
        description="Nominatim search endpoint used for geocoding",
    )
    overpass_url: str = Field(
        default="https://overpass-api.de/api/interpreter",
        description="Overpass API interpreter endpoint used for station queries",
    )
    ip_location_url: str = Field(
        default="http://ip-api.com/json/",
        description="IP geolocation endpoint used by the 'ip' location source",
    )
    user_agent: str = Field(
        default="fuel-finder/0.1 (+https://github.com/fuel-finder)",
        description="User-Agent sent to the external services (required by Nominatim)",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        description="Total timeout for outgoing HTTP requests (unset means no timeout)",
    )

    # Search configuration
    initial_search_radius_meters: int = Field(
        default=20_000, description="Radius of the first fallback search around the place"
    )
    max_radius_attempts: int = Field(
        default=5, description="Number of radius searches before giving up (radius doubles)"
    )

    # Location capability
    location_source: str = Field(
        default="ip", description="Location source for the CLI: 'ip', 'fixed' or 'none'"
    )
    fixed_latitude: float | None = Field(default=None, description="Latitude for 'fixed'")
    fixed_longitude: float | None = Field(default=None, description="Longitude for 'fixed'")
    location_timeout_seconds: float = Field(
        default=10.0, description="Timeout for a single location request"
    )
    location_max_age_seconds: float = Field(
        default=600.0, description="How long a previously obtained position is reused"
    )

    # Display configuration
    title: str = Field(default="NH Fuel Finder", description="Page title displayed in browser tab")
    map_center_latitude: float = Field(default=20.5937, description="Initial map center latitude")
    map_center_longitude: float = Field(
        default=78.9629, description="Initial map center longitude"
    )
    map_zoom: int = Field(default=5, description="Initial map zoom level")
    station_zoom: int = Field(default=12, description="Zoom level when centering on a station")
    user_zoom: int = Field(default=10, description="Zoom level when centering on the user")
    tile_url: str = Field(
        default="https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png",
        description="Map tile URL template",
    )
    highways: list[str] = Field(
        default_factory=list, description="Highway values always offered by the filter"
    )

    # TOML config file path
    config_file: str | None = Field(
        default="config.example.toml",
        description="Path to TOML configuration file for display and filter settings",
    )

    @field_validator("initial_search_radius_meters")
    @classmethod
    def validate_initial_radius(cls, v: int) -> int:
        """Validate the initial radius is positive."""
        if v <= 0:
            raise ValueError("initial_search_radius_meters must be positive")
        return v

    @field_validator("max_radius_attempts")
    @classmethod
    def validate_max_radius_attempts(cls, v: int) -> int:
        """Validate at least one radius attempt is made."""
        if v < 1:
            raise ValueError("max_radius_attempts must be at least 1")
        return v

    @field_validator("location_source")
    @classmethod
    def validate_location_source(cls, v: str) -> str:
        """Validate location source is one of 'ip', 'fixed' or 'none'."""
        if v.lower() not in LOCATION_SOURCES:
            raise ValueError("location_source must be one of 'ip', 'fixed' or 'none'")
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the log level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("log_level must be DEBUG, INFO, WARNING, ERROR or CRITICAL")
        return level

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse the TOML file; a missing default file yields no data."""
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            if "config_file" in self.model_fields_set:
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return {}

        with open(config_path, "rb") as f:
            return tomllib.load(f)

    def apply_toml(self) -> "AppConfig":
        """Update display and filter settings from the TOML file, if present.

        Returns:
            The same config instance, for chaining.

        Raises:
            FileNotFoundError: If an explicitly configured file does not exist.
            ValueError: If the file has malformed sections.
        """
        toml_data = self._load_toml_data()

        display = toml_data.get("display", {})
        if not isinstance(display, dict):
            raise ValueError("TOML config 'display' must be a table")
        for key in (
            "title",
            "map_center_latitude",
            "map_center_longitude",
            "map_zoom",
            "station_zoom",
            "user_zoom",
            "tile_url",
        ):
            if key in display:
                setattr(self, key, display[key])

        search = toml_data.get("search", {})
        if not isinstance(search, dict):
            raise ValueError("TOML config 'search' must be a table")
        if "initial_radius_meters" in search:
            self.initial_search_radius_meters = self.validate_initial_radius(
                int(search["initial_radius_meters"])
            )
        if "max_radius_attempts" in search:
            self.max_radius_attempts = self.validate_max_radius_attempts(
                int(search["max_radius_attempts"])
            )

        filter_config = toml_data.get("filter", {})
        if not isinstance(filter_config, dict):
            raise ValueError("TOML config 'filter' must be a table")
        highways = filter_config.get("highways", [])
        if not isinstance(highways, list):
            raise ValueError("TOML config 'filter.highways' must be a list")
        for highway in highways:
            value = str(highway).strip()
            if value and value not in self.highways:
                self.highways.append(value)

        return self
