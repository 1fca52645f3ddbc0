"""Tests for the text and CSV importers."""

import json
from datetime import datetime

import pytest

from forge_log.parsers import (
    RENPHO_HEADER,
    categorize_quote,
    detect_activity,
    map_marker,
    parse_affirmations,
    parse_blood_import,
    parse_cardio_text,
    parse_quote_line,
    parse_quotes,
    parse_renpho_csv,
    parse_steps_csv,
    parse_workout_text,
    write_renpho_csv,
    write_steps_csv,
)
from forge_log.parsers.base import parse_date


class TestQuoteParsing:
    """Tests for quote line parsing."""

    def test_text_and_author(self):
        """Test a quoted line splits into text and author."""
        parsed = parse_quote_line('"Fear = Fuel" - Me')
        assert parsed["text"] == "Fear = Fuel"
        assert parsed["author"] == "Me"

    def test_no_separator(self):
        """Test a line without an author gets Unknown."""
        parsed = parse_quote_line('"Out Work, Out Believe "')
        assert parsed["author"] == "Unknown"
        assert parsed["text"] == "Out Work, Out Believe"

    def test_splits_on_last_separator(self):
        """Test the author is taken after the last separator."""
        parsed = parse_quote_line('"Win - or learn" - Someone - Else')
        assert parsed["author"] == "Else"
        assert parsed["text"].startswith("Win - or learn")

    def test_leading_double_quote(self):
        """Test a doubled leading quote still splits on the last separator."""
        parsed = parse_quote_line(
            '""Every Man Has Two Lives, and the Second Starts When He Realizes '
            'He Has Just One" - Confucius'
        )
        assert parsed["author"] == "Confucius"
        assert "Every Man Has Two Lives" in parsed["text"]

    def test_question_mark_author(self):
        """Test a ? author becomes Unknown."""
        assert parse_quote_line('"Keep going" - ?')["author"] == "Unknown"

    def test_blank_lines_skipped(self):
        """Test empty lines are neither items nor errors."""
        result = parse_quotes('"One" - A\n\n   \n"Two" - B\n')
        assert [q["text"] for q in result.items] == ["One", "Two"]
        assert result.failed == 0

    def test_categorize(self):
        """Test keyword categories."""
        assert categorize_quote("The gym is my church") == "fitness"
        assert categorize_quote("Stay kind") == "motivational"

    def test_affirmations_inactive(self):
        """Test imported affirmations start inactive."""
        result = parse_affirmations("I am strong\nI am patient\n")
        assert len(result.items) == 2
        assert all(a["is_active"] == 0 for a in result.items)


class TestWorkoutParsing:
    """Tests for pipe-delimited workout import."""

    def test_header_and_row(self):
        """Test a header row is skipped and the data row imported."""
        result = parse_workout_text(
            "ORDER|TITLE|WEIGHT|REPS|NOTES\n1|Bench Press|135|8|felt strong", "push"
        )
        assert result.failed == 0
        assert result.items == [
            {
                "name": "Bench Press",
                "weight": 135,
                "reps": 8,
                "notes": "felt strong",
                "category": "push",
                "order": 1,
                "duration": "",
                "distance": "",
                "pace": "",
                "calories": 0,
                "rpe": 0,
            }
        ]

    def test_notes_keep_pipes(self):
        """Test notes may contain further separators."""
        result = parse_workout_text("1|Squat|225|5|belt | wraps", "legs")
        assert result.items[0]["notes"] == "belt | wraps"

    def test_blank_numbers_are_zero(self):
        """Test empty weight and reps default to zero."""
        result = parse_workout_text("2|Pull-Ups||", "pull")
        assert result.failed == 1

        result = parse_workout_text("2|Pull-Ups|||to failure", "pull")
        assert result.items[0]["weight"] == 0
        assert result.items[0]["reps"] == 0

    def test_bad_rows_reported(self):
        """Test malformed rows produce line-numbered errors."""
        result = parse_workout_text(
            "1|Bench|135|8|ok\n2|Row|heavy|8|\n3||100|8|\n4|Press", "push"
        )
        assert len(result.items) == 1
        assert result.failed == 3
        assert result.errors[0].startswith("Line 2:")
        assert result.errors[1].startswith("Line 3:")
        assert result.errors[2].startswith("Line 4:")

    def test_fractional_weight_rejected(self):
        """Test weights must be whole numbers."""
        result = parse_workout_text("1|Curl|22.5|10|", "pull")
        assert result.failed == 1
        assert "whole number" in result.errors[0]


class TestRenphoCsv:
    """Tests for the RENPHO scale export format."""

    CSV = (
        ",".join(RENPHO_HEADER) + "\n"
        "3/15/24, 7:02 AM,185.2,18.5,150.9,143.4,25.1,16.2,55.0,58.1,9,7.5,17.9,1850,32,170.0,-15.2,-5.1,2.3,Standard,--\n"
        "3/14/24, 7:10 AM,186.0,--,--,--,--,--,--,--,--,--,--,--,--,--,--,--,--,--,--\n"
    )

    def test_parse(self):
        """Test rows are parsed with missing values left out."""
        result = parse_renpho_csv(self.CSV)
        assert result.failed == 0
        first, second = result.items
        assert first["date"] == datetime(2024, 3, 15)
        assert first["time"] == "7:02 AM"
        assert first["weight"] == 185.2
        assert first["visceral_fat"] == 9
        assert first["body_type"] == "Standard"
        assert first["remarks"] is None
        assert second["body_fat"] is None

    def test_short_row_rejected(self):
        """Test a row with too few columns is reported."""
        result = parse_renpho_csv(",".join(RENPHO_HEADER) + "\n3/15/24,7:00\n")
        assert result.items == []
        assert result.errors == ["Line 2: expected at least 3 columns, got 2"]

    def test_bad_date_rejected(self):
        """Test an unreadable date is reported, not stored."""
        result = parse_renpho_csv(",".join(RENPHO_HEADER) + "\nyesterday,7:00,180\n")
        assert result.failed == 1

    def test_export_reimports(self):
        """Test exported CSV parses back to the same readings."""
        entries = parse_renpho_csv(self.CSV).items
        text = write_renpho_csv(entries)

        assert text.splitlines()[0] == ",".join(RENPHO_HEADER)
        assert text.splitlines()[1].startswith("3/15/24,")
        again = parse_renpho_csv(text).items
        assert [e["weight"] for e in again] == [185.2, 186.0]


class TestStepsCsv:
    """Tests for step-count CSV."""

    def test_parse_and_export(self):
        """Test step rows parse and export newest first."""
        result = parse_steps_csv(
            "Date,Steps,Distance,Floors Ascended\n2024-01-01,8000,3.5,10\n1/2/24,9500,,\n"
        )
        assert result.failed == 0
        assert result.items[1]["date"] == datetime(2024, 1, 2)
        assert result.items[1]["distance"] is None

        lines = write_steps_csv(result.items).splitlines()
        assert lines[1] == "2024-01-02,9500,,"
        assert lines[2] == "2024-01-01,8000,3.5,10"

    def test_negative_steps_rejected(self):
        """Test validation errors become row messages."""
        result = parse_steps_csv("Date,Steps\n2024-01-01,-5\n")
        assert result.failed == 1
        assert result.errors[0].startswith("Line 2:")


class TestBloodImport:
    """Tests for lab result import."""

    def test_marker_aliases(self):
        """Test lab spellings map to panel fields."""
        assert map_marker("Testosterone, Total") == "total_testosterone"
        assert map_marker("Vitamin Z") is None

    def test_long_format_groups_by_time(self):
        """Test one panel is built per distinct time."""
        text = (
            "marker,value,unit,reference_range,status,time\n"
            "Testosterone Total,650,ng/dL,264-916,,2024-01-10\n"
            "Estradiol,42,pg/mL,8-35,High,2024-01-10\n"
            "Mystery Marker,1,x,,,2024-01-10\n"
            "Testosterone Total,700,ng/dL,264-916,,2024-04-10\n"
        )
        result = parse_blood_import(text)
        assert result.failed == 0
        assert len(result.items) == 2
        first = result.items[0]
        assert first["as_of"] == datetime(2024, 1, 10)
        assert first["total_testosterone"] == 650
        assert first["estradiol_flag"] == "H"
        assert first["source"] == "csv_import"

    def test_wide_format(self):
        """Test the wide template reads camelCase headers."""
        result = parse_blood_import("asOf,totalTestosterone,notes\n2024-02-01,600,fasted\n")
        assert result.failed == 0
        assert result.items[0]["total_testosterone"] == 600
        assert result.items[0]["notes"] == "fasted"

    def test_json_array(self):
        """Test a JSON array of panels."""
        text = json.dumps([{"asOf": "2024-02-01", "source": "lab", "ferritin": 120}])
        result = parse_blood_import(text)
        assert result.items[0]["ferritin"] == 120

    def test_json_invalid_panel(self):
        """Test invalid panels are reported per item."""
        result = parse_blood_import(json.dumps([{"source": "lab"}]))
        assert result.items == []
        assert result.errors[0].startswith("Item 1:")


class TestCardioText:
    """Tests for free-text cardio parsing."""

    def test_full_sentence(self):
        """Test distance, duration, pace and calories are extracted."""
        draft = parse_cardio_text("ran 3.1 miles in 28 minutes, 350 calories, heart rate 152")
        assert draft["activityType"] == "Running"
        assert draft["distance"] == "3.1 miles"
        assert draft["duration"] == 28
        assert draft["pace"] == "9:02 /mi"
        assert draft["calories"] == 350
        assert draft["heartRate"] == 152

    def test_hours_and_minutes(self):
        """Test mixed hour and minute durations."""
        draft = parse_cardio_text("biked 20 km for 1 hour 15 minutes")
        assert draft["activityType"] == "Cycling"
        assert draft["duration"] == 75

    def test_hr_as_hour_unit(self):
        """Test "1 hr" is a duration, not a heart rate."""
        draft = parse_cardio_text("ran 6 miles in 1 hr 30 minutes")
        assert draft["duration"] == 90
        assert draft["pace"] == "15:00 /mi"
        assert "heartRate" not in draft

    def test_hr_as_heart_rate(self):
        """Test "hr" before a number still reads as heart rate."""
        draft = parse_cardio_text("ran 3 miles in 30 minutes, avg hr 148")
        assert draft["heartRate"] == 148
        assert draft["duration"] == 30

    def test_nothing_recognized(self):
        """Test unknown text still yields a draft."""
        draft = parse_cardio_text("felt great today")
        assert draft == {"activityType": "Other", "notes": "felt great today"}

    @pytest.mark.parametrize(
        "text,activity",
        [("walked the dog", "Walking"), ("swam laps", "Swimming"), ("rowing machine", "Rowing")],
    )
    def test_detect_activity(self, text, activity):
        """Test activity keywords."""
        assert detect_activity(text) == activity


class TestDates:
    """Tests for import date parsing."""

    @pytest.mark.parametrize(
        "text",
        ["3/5/24", "3/5/2024", "2024-03-05", "2024-03-05T00:00:00"],
    )
    def test_formats(self, text):
        """Test each accepted date format."""
        assert parse_date(text) == datetime(2024, 3, 5)

    def test_unknown_format(self):
        """Test unreadable text raises ValueError."""
        with pytest.raises(ValueError):
            parse_date("March fifth")
