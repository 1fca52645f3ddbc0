"""Services that combine parsing, storage and auditing."""

from .audit import AuditService
from .imports import (
    ImportResult,
    import_affirmations,
    import_blood,
    import_quotes,
    import_steps,
    import_weights,
    import_workouts,
)

__all__ = [
    "AuditService",
    "import_affirmations",
    "import_blood",
    "import_quotes",
    "import_steps",
    "import_weights",
    "import_workouts",
    "ImportResult",
]
