"""Append-only audit ledgers.

Rows are written as a side effect of mutations to weight entries, exercises
and personal records. Nothing in the application updates or deletes them.
"""

from enum import Enum

from .base import CamelModel, Resource, Timestamp


class AuditAction(str, Enum):
    """What happened to the audited entity."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    IMPORT = "import"


class AuditSource(str, Enum):
    """Where the change came from."""

    MANUAL = "manual"
    CSV = "csv"


class WeightAudit(CamelModel):
    """Before/after snapshot of the tracked weight-entry fields."""

    weight_entry_id: str
    action: AuditAction
    source: AuditSource = AuditSource.MANUAL
    entry_date: Timestamp | None = None
    previous_weight: float | None = None
    new_weight: float | None = None
    weight_delta: float | None = None
    weight_percent_change: float | None = None
    previous_body_fat: float | None = None
    new_body_fat: float | None = None
    body_fat_delta: float | None = None
    previous_muscle_mass: float | None = None
    new_muscle_mass: float | None = None
    muscle_mass_delta: float | None = None
    previous_bmi: float | None = None
    new_bmi: float | None = None
    bmi_delta: float | None = None


class ChangesAudit(CamelModel):
    """A change to one numeric field of a workout exercise."""

    exercise_id: str
    exercise_name: str
    category: str
    field: str = "weight"
    previous_value: float | None = None
    new_value: float | None = None
    delta: float | None = None
    percentage_change: float | None = None
    action: AuditAction = AuditAction.UPDATE
    source: AuditSource = AuditSource.MANUAL


class PRChangesAudit(CamelModel):
    """A change to one field of a personal record. Values are kept as text."""

    personal_record_id: str
    exercise: str
    category: str
    field: str
    previous_value: str | None = None
    new_value: str | None = None
    delta: float | None = None
    percentage_change: float | None = None
    action: AuditAction = AuditAction.UPDATE
    source: AuditSource = AuditSource.MANUAL


WEIGHT_AUDIT = Resource(
    name="weight_audit",
    label="Weight audit entry",
    table="weight_audit",
    model=WeightAudit,
)

CHANGES_AUDIT = Resource(
    name="changes_audit",
    label="Changes audit entry",
    table="changes_audit",
    model=ChangesAudit,
)

PR_CHANGES_AUDIT = Resource(
    name="pr_changes_audit",
    label="PR changes audit entry",
    table="pr_changes_audit",
    model=PRChangesAudit,
)
