"""Tests for audit ledger rules and import side effects."""

import asyncio

from forge_log.models import (
    CHANGES_AUDIT,
    EXERCISES,
    PERSONAL_RECORDS,
    PR_CHANGES_AUDIT,
    WEIGHT_AUDIT,
    WEIGHT_ENTRIES,
)
from forge_log.services import AuditService, import_quotes, import_weights, import_workouts


def run(coro):
    return asyncio.run(coro)


def make_weight(storage, weight, **extra):
    data = WEIGHT_ENTRIES.validate_insert({"date": "2024-01-01", "weight": weight, **extra})
    return run(storage.create(WEIGHT_ENTRIES, data))


class TestWeightAudit:
    """Tests for weight entry auditing."""

    def test_update_writes_delta(self, storage):
        """Test 160 -> 165 writes one row with delta 5."""
        entry = make_weight(storage, 160)
        updated = run(storage.update(WEIGHT_ENTRIES, entry["id"], {"weight": 165}))

        row = run(AuditService(storage).weight_updated(entry, updated))
        rows = run(storage.list_all(WEIGHT_AUDIT))

        assert len(rows) == 1
        assert rows[0]["id"] == row["id"]
        assert rows[0]["action"] == "update"
        assert rows[0]["source"] == "manual"
        assert rows[0]["previous_weight"] == 160
        assert rows[0]["new_weight"] == 165
        assert rows[0]["weight_delta"] == 5
        assert rows[0]["weight_percent_change"] == 3.12

    def test_unchanged_update_writes_nothing(self, storage):
        """Test 160 -> 160 writes no row."""
        entry = make_weight(storage, 160)
        updated = run(storage.update(WEIGHT_ENTRIES, entry["id"], {"remarks": "after lunch"}))

        assert run(AuditService(storage).weight_updated(entry, updated)) is None
        assert run(storage.list_all(WEIGHT_AUDIT)) == []

    def test_body_fat_change_audited(self, storage):
        """Test a change to any tracked field is recorded."""
        entry = make_weight(storage, 160, bodyFat=20.0)
        updated = run(storage.update(WEIGHT_ENTRIES, entry["id"], {"body_fat": 19.5}))

        row = run(AuditService(storage).weight_updated(entry, updated))
        assert row["body_fat_delta"] == -0.5
        assert row["weight_delta"] == 0

    def test_create_and_delete_rows(self, storage):
        """Test create rows carry only new values and delete rows only previous ones."""
        entry = make_weight(storage, 170)
        audit = AuditService(storage)

        created = run(audit.weight_created(entry))
        deleted = run(audit.weight_deleted(entry))

        assert created["previous_weight"] is None
        assert created["new_weight"] == 170
        assert deleted["previous_weight"] == 170
        assert deleted["new_weight"] is None
        assert deleted["action"] == "delete"

    def test_import_rows(self, storage):
        """Test imported entries are audited as csv imports."""
        text = "Date, Time, Weight(lb)\n1/1/24,7:00,180.5\n1/2/24,7:00,180.1\n"
        result = run(import_weights(storage, text))

        assert result.imported == 2
        rows = run(storage.list_all(WEIGHT_AUDIT))
        assert len(rows) == 2
        assert {r["action"] for r in rows} == {"import"}
        assert {r["source"] for r in rows} == {"csv"}


class TestExerciseAudit:
    """Tests for exercise change auditing."""

    def test_manual_weight_change(self, storage):
        """Test a manual weight edit is recorded."""
        data = EXERCISES.validate_insert({"name": "Bench", "category": "push", "weight": 135})
        exercise = run(storage.create(EXERCISES, data))
        updated = run(storage.update(EXERCISES, exercise["id"], {"weight": 145}))

        rows = run(AuditService(storage).exercise_updated(exercise, updated))
        assert len(rows) == 1
        assert rows[0]["delta"] == 10
        assert rows[0]["exercise_name"] == "Bench"

    def test_import_replaces_category(self, storage):
        """Test a workout import deletes the day's prior exercises first."""
        for name in ("Old One", "Old Two"):
            data = EXERCISES.validate_insert({"name": name, "category": "push"})
            run(storage.create(EXERCISES, data))
        data = EXERCISES.validate_insert({"name": "Row", "category": "pull"})
        run(storage.create(EXERCISES, data))

        result = run(import_workouts(
            storage, "ORDER|TITLE|WEIGHT|REPS|NOTES\n1|Bench Press|135|8|felt strong", "push"
        ))

        assert result.imported == 1
        push = run(storage.exercises_by_category("push"))
        assert [(e["name"], e["weight"], e["reps"], e["order"]) for e in push] == [
            ("Bench Press", 135, 8, 1)
        ]
        assert len(run(storage.exercises_by_category("pull"))) == 1

    def test_import_with_no_valid_rows_clears_day(self, storage):
        """Test the day is cleared before rows are read, even if none are valid."""
        data = EXERCISES.validate_insert({"name": "Old", "category": "push"})
        run(storage.create(EXERCISES, data))

        result = run(import_workouts(storage, "not a workout row", "push"))

        assert result.imported == 0
        assert result.failed == 1
        assert run(storage.exercises_by_category("push")) == []

    def test_import_flags_increases_only(self, storage):
        """Test import audits increases and ignores decreases."""
        for name, weight in (("Bench", 135), ("Curl", 40)):
            data = EXERCISES.validate_insert(
                {"name": name, "category": "push", "weight": weight, "reps": 8}
            )
            run(storage.create(EXERCISES, data))

        run(import_workouts(storage, "1|Bench|145|8|\n2|Curl|35|8|", "push"))

        rows = run(storage.list_all(CHANGES_AUDIT))
        assert len(rows) == 1
        assert rows[0]["exercise_name"] == "Bench"
        assert rows[0]["previous_value"] == 135
        assert rows[0]["new_value"] == 145
        assert rows[0]["action"] == "import"
        assert rows[0]["source"] == "csv"


class TestPersonalRecordAudit:
    """Tests for personal record auditing."""

    def test_time_change(self, storage):
        """Test time fields are compared in seconds."""
        data = PERSONAL_RECORDS.validate_insert(
            {"exercise": "Mile", "category": "Cardio", "time": "7:00"}
        )
        record = run(storage.create(PERSONAL_RECORDS, data))
        updated = run(storage.update(PERSONAL_RECORDS, record["id"], {"time": "6:30"}))

        rows = run(AuditService(storage).personal_record_updated(record, updated))
        assert len(rows) == 1
        assert rows[0]["field"] == "time"
        assert rows[0]["previous_value"] == "7:00"
        assert rows[0]["delta"] == -30

        assert len(run(storage.list_all(PR_CHANGES_AUDIT))) == 1

    def test_unchanged_record(self, storage):
        """Test edits outside tracked fields write nothing."""
        data = PERSONAL_RECORDS.validate_insert(
            {"exercise": "Squat", "category": "Strength", "weight": "315"}
        )
        record = run(storage.create(PERSONAL_RECORDS, data))
        updated = run(storage.update(PERSONAL_RECORDS, record["id"], {"order": 4}))

        assert run(AuditService(storage).personal_record_updated(record, updated)) == []


class TestQuoteImport:
    """Tests for quote import modes."""

    def test_replace_and_append(self, storage):
        """Test replace clears existing quotes and append keeps them."""
        run(import_quotes(storage, '"First" - A'))
        run(import_quotes(storage, '"Second" - B'))
        run(import_quotes(storage, '"Third" - C', append=True))

        texts = sorted(q["text"] for q in run(storage.list_all("quotes")))
        assert texts == ["Second", "Third"]

    def test_empty_batch_keeps_quotes(self, storage):
        """Test a batch without valid quotes does not clear anything."""
        run(import_quotes(storage, '"Keep" - A'))
        result = run(import_quotes(storage, "\n\n"))

        assert result.imported == 0
        assert len(run(storage.list_all("quotes"))) == 1
