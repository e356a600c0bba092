"""Nominatim geocoding adapter."""

from fuel_finder.adapters.nominatim_api.nominatim_geocoder import NominatimGeocoder

__all__ = ["NominatimGeocoder"]
