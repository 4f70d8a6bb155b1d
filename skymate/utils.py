"""Utility functions for the roulette service."""


def format_miles(miles: float) -> str:
    """
    Format a mileage with thousand separators and no decimals.

    Args:
        miles: Mileage to format

    Returns:
        Formatted string like "12,345"

    Examples:
        >>> format_miles(12345)
        '12,345'
        >>> format_miles(510)
        '510'
    """
    return f"{round(miles):,}"
