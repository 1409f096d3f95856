"""Time utilities for the domain layer."""


def month_key(year: int, month: int) -> str:
    return f"{year:04d}-{month:02d}"
