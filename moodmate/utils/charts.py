"""
ASCII Chart Utilities
----------------------

Terminal visualizations for journal statistics.

Functions:
    - percentage_bar_chart: Horizontal bars for labelled percentages
    - month_calendar: Month grid with a marker per recorded day
"""
import calendar
from datetime import date
from typing import Dict, List, Sequence, Tuple

from .numbers import round_half_up


def percentage_bar_chart(
    rows: Sequence[Tuple[str, int, float]],
    max_width: int = 20,
    empty_char: str = "░",
    fill_char: str = "█",
) -> List[str]:
    """
    Generate ASCII bar chart lines for (label, count, percentage) rows.

    Bars are scaled against 100%, so a category holding every entry fills
    the full width.

    Args:
        rows: Sequence of (label, count, percentage) tuples
        max_width: Maximum bar width in characters
        empty_char: Character for empty/zero values
        fill_char: Character for filled space

    Returns:
        List of formatted chart lines

    Example:
        >>> lines = percentage_bar_chart([("Happy", 2, 66.7), ("Sad", 1, 33.3)], max_width=10)
        >>> for line in lines:
        ...     print(line)
        Happy        ██████      2 entries (67%)
        Sad          ███         1 entry (33%)
    """
    lines = []
    for label, count, percentage in rows:
        bar_length = int((percentage / 100) * max_width)
        bar = fill_char * bar_length if bar_length > 0 else empty_char
        noun = "entry" if count == 1 else "entries"
        lines.append(
            f"{label:12s} {bar:{max_width}s} {count} {noun} ({round_half_up(percentage)}%)"
        )
    return lines


def month_calendar(
    year: int, month: int, marks: Dict[str, str], blank: str = "·"
) -> List[str]:
    """
    Render a month grid, Monday first, with a marker on marked days.

    Args:
        year: Calendar year
        month: Calendar month (1-12)
        marks: Mapping of "YYYY-MM-DD" to a one-glyph marker
        blank: Marker for days without an entry

    Returns:
        Header line, weekday line, and one line per week
    """
    lines = [f"{calendar.month_name[month]} {year}", "Mo  Tu  We  Th  Fr  Sa  Su"]
    for week in calendar.Calendar(firstweekday=0).monthdayscalendar(year, month):
        cells = []
        for day in week:
            if day == 0:
                cells.append("    ")
                continue
            key = date(year, month, day).isoformat()
            cells.append(f"{day:2d}{marks.get(key, blank)} ")
        lines.append("".join(cells).rstrip())
    return lines
