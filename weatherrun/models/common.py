"""Common helpers shared across models."""

from datetime import datetime


def local_now() -> datetime:
    """Current local wall-clock time (naive), matching the provider's local dates."""
    return datetime.now()
