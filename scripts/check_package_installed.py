#!/usr/bin/env python3
"""Check if the nstimes package and its station table are installed."""

import sys

try:
    from nstimes.adapters.stations import load_bundled_stations

    sys.exit(0 if load_bundled_stations() else 1)
except (ImportError, FileNotFoundError):
    sys.exit(1)
