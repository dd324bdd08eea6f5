"""blurnet: normalized outcomes for mobile API calls."""

__version__ = "0.1.0"
