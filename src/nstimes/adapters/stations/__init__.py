"""Station table adapters."""

from nstimes.adapters.stations.bundled_station_table import load_bundled_stations

__all__ = ["load_bundled_stations"]
