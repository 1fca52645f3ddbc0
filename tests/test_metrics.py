"""Tests for derived metrics."""

from datetime import datetime, timedelta, timezone

import pytest

from forge_log.utils.metrics import (
    blood_deltas,
    bodyweight_percentage,
    cardio_summary,
    change,
    format_pace,
    get_zone,
    local_day,
    next_workout_category,
    parse_distance_miles,
    parse_record_value,
    step_summary,
)


class TestBodyweightPercentage:
    """Tests for lift-to-bodyweight ratios."""

    def test_one_decimal(self):
        """Test the ratio is rounded to one decimal place."""
        assert bodyweight_percentage(185, 170) == "108.8"

    def test_text_weights(self):
        """Test weights stored as text are parsed."""
        assert bodyweight_percentage("225 lbs", "180") == "125.0"

    @pytest.mark.parametrize("lift,body", [(185, 0), (185, None), ("", 170), (0, 170)])
    def test_not_computable(self, lift, body):
        """Test missing or zero operands give None."""
        assert bodyweight_percentage(lift, body) is None


class TestChange:
    """Tests for delta computation."""

    def test_delta_and_percent(self):
        """Test signed delta and percent change."""
        assert change(160, 165) == (5, 3.12)

    def test_no_percent_from_zero(self):
        """Test the percent is omitted when the previous value is zero."""
        assert change(0, 10) == (10, None)

    def test_missing_side(self):
        """Test either side missing yields no delta."""
        assert change(None, 10) == (None, None)


class TestParsing:
    """Tests for distance and record parsing."""

    @pytest.mark.parametrize(
        "text,miles",
        [
            ("3.1 miles", 3.1),
            ("2 mi", 2.0),
            ("5k", 3.107),
            ("5 km", 3.107),
            ("800 m", 0.497),
            ("4", 4.0),
        ],
    )
    def test_distance_miles(self, text, miles):
        """Test distances normalize to miles."""
        assert parse_distance_miles(text) == miles

    def test_distance_unreadable(self):
        """Test text without a number gives None."""
        assert parse_distance_miles("far") is None

    def test_record_value_time(self):
        """Test times are read as seconds."""
        assert parse_record_value("6:30") == 390
        assert parse_record_value("1:02:03") == 3723

    def test_record_value_number(self):
        """Test plain numbers are read as numbers."""
        assert parse_record_value("315") == 315
        assert parse_record_value("") is None

    def test_pace(self):
        """Test pace formatting."""
        assert format_pace(30, 3) == "10:00 /mi"
        assert format_pace(30, 0) == ""


class TestRotation:
    """Tests for the workout rotation."""

    def test_next_category(self):
        """Test the rotation advances and wraps."""
        assert next_workout_category("push") == "pull"
        assert next_workout_category("legs2") == "push"

    def test_no_history(self):
        """Test an unknown or missing last day starts at the beginning."""
        assert next_workout_category(None) == "push"
        assert next_workout_category("cardio") == "push"


class TestLocalDay:
    """Tests for the day key daily tracking is stored under."""

    def test_local_day_utc(self):
        """Test a naive timestamp is read as UTC."""
        assert local_day("UTC", datetime(2024, 5, 1, 23, 59)) == "2024-05-01"

    def test_local_day_converts_aware(self):
        """Test an aware timestamp is converted before taking the date."""
        early = datetime(2024, 5, 1, 1, 0, tzinfo=timezone(timedelta(hours=2)))
        assert local_day("UTC", early) == "2024-04-30"

    def test_unknown_zone(self):
        """Test an unknown zone name is a ValueError."""
        with pytest.raises(ValueError):
            get_zone("Nowhere/Atlantis")


class TestSummaries:
    """Tests for rolling activity summaries."""

    def test_step_windows(self):
        """Test entries fall into the windows ending on the reference date."""
        entries = [
            {"date": datetime(2024, 3, 10), "steps": 10000, "distance": 4.0},
            {"date": datetime(2024, 3, 1), "steps": 6000, "distance": None},
            {"date": datetime(2023, 6, 1), "steps": 2000, "distance": 1.0},
        ]
        summary = step_summary(entries, datetime(2024, 3, 10, 15, 0))

        assert summary["week"] == {
            "days": 1, "totalSteps": 10000, "averageSteps": 10000, "totalDistance": 4.0,
        }
        assert summary["month"]["totalSteps"] == 16000
        assert summary["month"]["averageSteps"] == 8000
        assert summary["year"]["days"] == 3

    def test_cardio_windows(self):
        """Test cardio totals convert distances to miles."""
        entries = [
            {"date": datetime(2024, 3, 9), "duration": 30, "distance": "5 km", "calories": 300},
            {"date": datetime(2024, 3, 8), "duration": 20, "distance": "2 miles", "calories": None},
        ]
        week = cardio_summary(entries, datetime(2024, 3, 10))["week"]

        assert week["sessions"] == 2
        assert week["totalMinutes"] == 50
        assert week["totalMiles"] == 5.11
        assert week["totalCalories"] == 300

    def test_empty(self):
        """Test an empty history gives zeroed windows."""
        summary = step_summary([], datetime(2024, 1, 1))
        assert summary["year"] == {
            "days": 0, "totalSteps": 0, "averageSteps": 0, "totalDistance": 0,
        }


class TestBloodDeltas:
    """Tests for panel-to-panel comparisons."""

    def test_shared_markers_only(self):
        """Test only markers on both panels are compared."""
        current = {"total_testosterone": 700.0, "ferritin": 90.0}
        previous = {"total_testosterone": 560.0, "estradiol": 30.0}

        deltas = blood_deltas(current, previous)
        assert list(deltas) == ["total_testosterone"]
        assert deltas["total_testosterone"]["change"] == 140
        assert deltas["total_testosterone"]["percentChange"] == 25.0

    def test_no_previous(self):
        """Test the first panel has nothing to compare against."""
        assert blood_deltas({"ferritin": 90.0}, None) == {}
