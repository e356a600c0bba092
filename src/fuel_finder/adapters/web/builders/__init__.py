"""Builders for LiveView template data."""

from fuel_finder.adapters.web.builders.template_data_builder import (
    EMPTY_LIST_TEXT,
    build_map_payload,
    build_template_assigns,
    map_json,
)

__all__ = ["EMPTY_LIST_TEXT", "build_map_payload", "build_template_assigns", "map_json"]
