"""Static station table bundled with the package.

The table lives in ``nstimes/data/stations.json`` as a list of
``{"name": ..., "code": ...}`` objects and is regenerated with
``scripts/update_stations.py``.
"""

import json
from functools import lru_cache
from importlib import resources

from nstimes.domain.models.station import StationRecord

STATIONS_RESOURCE = "data/stations.json"


@lru_cache(maxsize=1)
def load_bundled_stations() -> tuple[StationRecord, ...]:
    """Load the bundled station table once per process."""
    raw = json.loads(
        resources.files("nstimes").joinpath(STATIONS_RESOURCE).read_text(encoding="utf-8")
    )
    return tuple(StationRecord(display_name=item["name"], code=int(item["code"])) for item in raw)
