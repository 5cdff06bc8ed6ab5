"""
test_charts.py
--------------
Unit tests for ASCII chart helpers.
"""
from moodmate.utils.charts import month_calendar, percentage_bar_chart


class TestPercentageBarChart:
    """Tests for percentage_bar_chart."""

    def test_bar_scaled_to_width(self):
        [line] = percentage_bar_chart([("Happy", 3, 50.0)], max_width=10)
        assert "█████" in line
        assert "██████" not in line
        assert line.endswith("3 entries (50%)")

    def test_singular_entry(self):
        [line] = percentage_bar_chart([("Sad", 1, 100.0)], max_width=4)
        assert line.endswith("1 entry (100%)")

    def test_zero_uses_empty_char(self):
        [line] = percentage_bar_chart([("Angry", 0, 0.0)], max_width=4)
        assert "░" in line
        assert "█" not in line

    def test_percentage_rounds_half_up(self):
        [line] = percentage_bar_chart([("Sick", 5, 62.5)])
        assert line.endswith("(63%)")

    def test_one_line_per_row(self):
        rows = [("Happy", 2, 66.7), ("Sad", 1, 33.3)]
        assert len(percentage_bar_chart(rows)) == 2


class TestMonthCalendar:
    """Tests for month_calendar."""

    def test_header_and_weeks(self):
        lines = month_calendar(2025, 4, {})
        assert lines[0] == "April 2025"
        assert lines[1].startswith("Mo")
        # April 2025 starts on a Tuesday and spans five weeks
        assert len(lines) == 7
        assert lines[2] == "     1·  2·  3·  4·  5·  6·"

    def test_marks_days(self):
        lines = month_calendar(2025, 4, {"2025-04-03": "☺"})
        assert " 3☺" in lines[2]
        assert " 4·" in lines[2]
