"""Tests for CLI helper functions."""

import json
from datetime import date
from pathlib import Path

import pytest

from nstimes.adapters.cache import PriceCache
from nstimes.application.services import StationMatcher
from nstimes.cli import (
    _handle_cache_command,
    _handle_stations_command,
    _setup_argparse,
    format_euros,
    format_price,
)
from nstimes.domain.models import Price, StationRecord


@pytest.fixture
def matcher() -> StationMatcher:
    """Matcher over three stations."""
    return StationMatcher(
        [
            StationRecord("Amsterdam Centraal", 8400058),
            StationRecord("Amsterdam Sloterdijk", 8400054),
            StationRecord("Utrecht Centraal", 8400621),
        ]
    )


@pytest.mark.parametrize(
    ("cents", "expected"), [(940, "€9.40"), (0, "€0.00"), (12345, "€123.45"), (5, "€0.05")]
)
def test_format_euros(cents: int, expected: str) -> None:
    """Given an amount in cents, when formatting, then shows euros with two decimals."""
    assert format_euros(cents) == expected


def test_format_price_shows_best_option_and_discount() -> None:
    """Given a discounted best option, when formatting, then all details are listed."""
    price = Price(
        total_price_in_cents=752,
        price_per_adult_in_cents=752,
        discount_in_cents=188,
        discount_type="DAL_VOORDEEL",
        travel_class="SECOND_CLASS",
        display_name="Enkele reis",
        operator_name="NS",
        is_best_option=True,
    )

    assert format_price(price) == [
        "€7.52 - Enkele reis (2nd class) * Best option",
        "  Per adult: €7.52",
        "  Discount: €1.88",
        "  Discount type: DAL_VOORDEEL",
        "  Operator: NS",
    ]


def test_format_price_omits_empty_details() -> None:
    """Given a plain first class price, when formatting, then only price lines are shown."""
    price = Price(
        total_price_in_cents=1580,
        price_per_adult_in_cents=1580,
        discount_type="NONE",
        travel_class="FIRST_CLASS",
        display_name="Cached Price",
    )

    assert format_price(price) == ["€15.80 - Cached Price (1st class)", "  Per adult: €15.80"]


class TestArgumentParsing:
    """Tests for the argument parser."""

    def test_price_defaults_to_second_class_single(self) -> None:
        """Given only two stations, when parsing, then class 2 single trip is used."""
        args = _setup_argparse().parse_args(["price", "Amsterdam", "Utrecht"])

        assert args.command == "price"
        assert args.origin == "Amsterdam"
        assert args.destination == "Utrecht"
        assert args.travel_class == 2
        assert args.is_return is False
        assert args.cache is None

    def test_price_accepts_class_return_and_cache(self) -> None:
        """Given all options, when parsing, then they are set."""
        args = _setup_argparse().parse_args(
            ["--cache", "prices.json", "price", "Zwolle", "Groningen", "--class", "1", "--return"]
        )

        assert args.cache == "prices.json"
        assert args.travel_class == 1
        assert args.is_return is True

    def test_invalid_class_is_rejected(self) -> None:
        """Given class 3, when parsing, then argparse exits."""
        with pytest.raises(SystemExit):
            _setup_argparse().parse_args(["price", "Zwolle", "Groningen", "--class", "3"])


class TestStationsCommand:
    """Tests for the stations command."""

    def test_when_json_requested_then_prints_matches(
        self, matcher: StationMatcher, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Given an ambiguous query, when printing JSON, then lists all candidates."""
        _handle_stations_command(matcher, "amsterdam", output_json=True)

        assert json.loads(capsys.readouterr().out) == [
            {"name": "Amsterdam Centraal", "uic_code": 8400058},
            {"name": "Amsterdam Sloterdijk", "uic_code": 8400054},
        ]

    def test_when_single_match_then_prints_name_and_code(
        self, matcher: StationMatcher, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Given a unique query, when printing, then shows the station and its code."""
        _handle_stations_command(matcher, "utrecht", output_json=False)

        out = capsys.readouterr().out
        assert "Found 1 station(s)" in out
        assert "Utrecht Centraal" in out
        assert "UIC code: 8400621" in out

    def test_when_no_match_with_json_then_prints_empty_list(
        self, matcher: StationMatcher, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Given an unknown query, when printing JSON, then prints an empty list."""
        _handle_stations_command(matcher, "Maastricht", output_json=True)

        assert json.loads(capsys.readouterr().out) == []

    def test_when_no_match_then_exits_with_error(
        self, matcher: StationMatcher, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Given an unknown query, when printing text, then exits with status 1."""
        with pytest.raises(SystemExit) as exc_info:
            _handle_stations_command(matcher, "Maastricht", output_json=False)

        assert exc_info.value.code == 1
        assert "No stations found for 'Maastricht'" in capsys.readouterr().err


class TestCacheCommand:
    """Tests for the cache command."""

    @pytest.fixture
    def cache_file(self, tmp_path: Path) -> Path:
        """Cache file with one expired and one valid entry."""
        path = tmp_path / "prices.json"
        path.write_text(
            json.dumps(
                {
                    "Breda-Tilburg-2": {
                        "price_cents": 500,
                        "travel_class": 2,
                        "expires_at": "2000-01-01",
                    },
                    "Delft-Gouda-2": {
                        "price_cents": 450,
                        "travel_class": 2,
                        "expires_at": "2999-01-01",
                    },
                }
            ),
            encoding="utf-8",
        )
        return path

    def test_when_stats_then_prints_counts(
        self, cache_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Given a cache file, when showing stats, then prints total, valid and expired."""
        _handle_cache_command("stats", str(cache_file))

        out = capsys.readouterr().out
        assert "Total entries:   2" in out
        assert "Valid entries:   1" in out
        assert "Expired entries: 1" in out

    def test_when_cleanup_then_removes_expired(
        self, cache_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Given an expired entry, when cleaning up, then it is removed from the file."""
        _handle_cache_command("cleanup", str(cache_file))

        assert "Removed 1 expired entry" in capsys.readouterr().out
        remaining = PriceCache(cache_file, today=lambda: date(2025, 6, 15))
        assert remaining.stats().total == 1

    def test_when_no_cache_file_then_exits_with_error(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Given no cache file, when running a cache action, then exits with status 1."""
        with pytest.raises(SystemExit) as exc_info:
            _handle_cache_command("stats", None)

        assert exc_info.value.code == 1
        assert "No cache file given" in capsys.readouterr().err
