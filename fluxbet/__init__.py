"""In-memory group-based betting platform with pooled stakes and fee-adjusted payouts."""

__version__ = "0.1.0"
__all__ = ["errors", "state", "utils", "processor", "program"]