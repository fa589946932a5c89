"""Ports (interfaces) for the ports-and-adapters architecture."""

from nstimes.domain.ports.price_repository import PriceRepository

__all__ = ["PriceRepository"]
