"""Client for the NS travel API with offline station lookup and price caching."""

__version__ = "0.3.0"
