#!/usr/bin/env python3
"""Regenerate the bundled station table from the NS stations API.

Fetches all plannable stations and writes src/nstimes/data/stations.json as a
list of {"name", "code"} objects, sorted by name.

Usage:
    NS_API_TOKEN=... python scripts/update_stations.py
"""

import asyncio
import json
import os
import sys
from pathlib import Path
from typing import Any

import aiohttp

from nstimes.adapters.ns_api.constants import NS_STATIONS_URL, SUBSCRIPTION_KEY_HEADER

OUTPUT_PATH = Path(__file__).resolve().parent.parent / "src" / "nstimes" / "data" / "stations.json"


async def fetch_stations(api_token: str) -> list[dict[str, Any]]:
    """Download the station list payload."""
    headers = {"Cache-Control": "no-cache", SUBSCRIPTION_KEY_HEADER: api_token}
    params = {"includeNonPlannableStations": "false"}
    async with aiohttp.ClientSession() as session:
        async with session.get(NS_STATIONS_URL, headers=headers, params=params) as response:
            response.raise_for_status()
            data = await response.json()
    return data.get("payload", [])


def to_table(payload: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Keep the long name and UIC code, dropping duplicates by name."""
    table: dict[str, int] = {}
    for station in payload:
        name = station.get("names", {}).get("long", "")
        code = station.get("id", {}).get("uicCode", "")
        if name and str(code).isdigit():
            table.setdefault(name, int(code))
    return [{"name": name, "code": code} for name, code in sorted(table.items())]


def main() -> None:
    api_token = os.getenv("NS_API_TOKEN")
    if not api_token:
        print("NS_API_TOKEN not found", file=sys.stderr)
        sys.exit(1)

    print(f"Fetching stations from {NS_STATIONS_URL} ...")
    table = to_table(asyncio.run(fetch_stations(api_token)))
    print(f"Parsed {len(table)} stations")

    OUTPUT_PATH.parent.mkdir(parents=True, exist_ok=True)
    with open(OUTPUT_PATH, "w", encoding="utf-8") as f:
        f.write("[\n")
        f.write(",\n".join(f"  {json.dumps(row, ensure_ascii=False)}" for row in table))
        f.write("\n]\n")

    print(f"Wrote {OUTPUT_PATH}")


if __name__ == "__main__":
    main()
