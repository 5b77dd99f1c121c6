from countrytable.services.country_list import Direction, SortSpec
from countrytable.ui.constants import MISSING_VALUE, SORT_ASCENDING_ICON, SORT_DESCENDING_ICON


def format_count(value: int | None) -> str:
    """Format an integer with thousands separators.

    Args:
        value: Integer to format

    Returns:
        Formatted string (e.g., "67,391,582")
    """
    if value is None:
        return MISSING_VALUE
    return f"{value:,}"


def format_area(value: float | None) -> str:
    """Format an area in square kilometres.

    Args:
        value: Area, possibly fractional

    Returns:
        Whole numbers without decimals, fractional values with two
    """
    if value is None:
        return MISSING_VALUE
    if float(value).is_integer():
        return f"{value:,.0f}"
    return f"{value:,.2f}"


def format_gini(value: float | None) -> str:
    if value is None:
        return MISSING_VALUE
    return f"{value:.1f}"


def format_header(label: str, column_key: str, sort_spec: SortSpec) -> str:
    """Column header text with the sort indicator on the active column."""
    if column_key != sort_spec.key:
        return label
    icon = SORT_ASCENDING_ICON if sort_spec.direction is Direction.ASCENDING else SORT_DESCENDING_ICON
    return f"{label} {icon}"


def format_status(shown: int, total: int) -> str:
    return f"{shown} of {total}"
