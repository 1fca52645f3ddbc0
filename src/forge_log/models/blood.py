"""Blood lab panels.

A panel carries one numeric value per marker, the unit it was reported in
and an optional out-of-range flag. The marker table below is the single
source for the panel's fields, the storage columns and the CSV importer's
name mapping.
"""

from dataclasses import dataclass, field
from typing import Any

from pydantic import Field, create_model

from .base import CamelModel, Resource, Timestamp


@dataclass(frozen=True)
class BloodMarker:
    """A lab marker tracked on a panel."""

    key: str
    label: str
    unit: str | None
    aliases: tuple[str, ...] = field(default_factory=tuple)


BLOOD_MARKERS: list[BloodMarker] = [
    # Hormones
    BloodMarker("total_testosterone", "Total Testosterone", "ng/dL",
                ("testosterone", "testosterone total", "testosterone serum")),
    BloodMarker("free_testosterone", "Free Testosterone", "pg/mL",
                ("testosterone free", "free testosterone direct")),
    BloodMarker("shbg", "SHBG", "nmol/L", ("sex hormone binding globulin",)),
    BloodMarker("estradiol", "Estradiol", "pg/mL", ("e2", "estradiol sensitive")),
    BloodMarker("estrogens_total", "Estrogens, Total", "pg/mL", ("total estrogens",)),
    BloodMarker("dhea_sulfate", "DHEA Sulfate", "ug/dL", ("dhea s", "dheas")),
    BloodMarker("cortisol_am", "Cortisol (AM)", "ug/dL", ("cortisol", "cortisol total")),
    BloodMarker("psa", "PSA", "ng/mL", ("psa total", "prostate specific antigen")),
    BloodMarker("lh", "LH", "mIU/mL", ("luteinizing hormone",)),
    BloodMarker("fsh", "FSH", "mIU/mL", ("follicle stimulating hormone",)),
    BloodMarker("prolactin", "Prolactin", "ng/mL"),
    BloodMarker("igf1", "IGF-1", "ng/mL", ("igf 1", "insulin like growth factor 1")),
    # Thyroid
    BloodMarker("tsh", "TSH", "uIU/mL", ("thyroid stimulating hormone",)),
    BloodMarker("free_t3", "Free T3", "pg/mL", ("t3 free", "triiodothyronine free")),
    BloodMarker("free_t4", "Free T4", "ng/dL", ("t4 free", "thyroxine free")),
    BloodMarker("tpo_ab", "TPO Antibodies", "IU/mL",
                ("thyroid peroxidase antibodies", "tpo")),
    # Metabolic and inflammation
    BloodMarker("vitamin_d_25oh", "Vitamin D, 25-OH", "ng/mL",
                ("vitamin d", "vitamin d 25 hydroxy", "25 oh vitamin d")),
    BloodMarker("crp_hs", "hs-CRP", "mg/L", ("hs crp", "c reactive protein", "crp")),
    BloodMarker("insulin", "Insulin", "uIU/mL", ("insulin fasting",)),
    BloodMarker("glucose", "Glucose", "mg/dL", ("glucose fasting",)),
    BloodMarker("hba1c", "Hemoglobin A1c", "%", ("a1c", "hemoglobin a1c", "hgb a1c")),
    BloodMarker("albumin", "Albumin", "g/dL"),
    BloodMarker("ferritin", "Ferritin", "ng/mL"),
    BloodMarker("hemoglobin", "Hemoglobin", "g/dL", ("hgb",)),
    BloodMarker("hematocrit", "Hematocrit", "%", ("hct",)),
    # Lipids
    BloodMarker("cholesterol_total", "Total Cholesterol", "mg/dL",
                ("cholesterol", "total cholesterol")),
    BloodMarker("triglycerides", "Triglycerides", "mg/dL", ("tg",)),
    BloodMarker("hdl", "HDL Cholesterol", "mg/dL", ("hdl cholesterol", "hdl c")),
    BloodMarker("ldl_calc", "LDL Cholesterol (calc)", "mg/dL",
                ("ldl", "ldl cholesterol", "ldl c", "ldl cholesterol calc")),
    BloodMarker("vldl_calc", "VLDL Cholesterol (calc)", "mg/dL",
                ("vldl", "vldl cholesterol")),
    BloodMarker("apob", "Apolipoprotein B", "mg/dL", ("apo b", "apolipoprotein b")),
]

# Derived ratios carry no unit or flag.
BLOOD_RATIOS: list[str] = [
    "testosterone_estrogen_ratio",
    "ldl_apob_ratio",
    "tg_hdl_ratio",
]

BLOOD_MARKERS_BY_KEY: dict[str, BloodMarker] = {m.key: m for m in BLOOD_MARKERS}


class Attachment(CamelModel):
    """A file attached to a blood panel (lab PDF, photo of results)."""

    file_name: str = Field(min_length=1)
    file_url: str = Field(min_length=1)
    file_type: str = Field(min_length=1)
    file_size: int = Field(gt=0)


def _panel_fields() -> dict[str, Any]:
    fields: dict[str, Any] = {
        "as_of": (Timestamp, ...),
        "source": (str, Field(min_length=1)),
    }
    for marker in BLOOD_MARKERS:
        fields[marker.key] = (float | None, None)
        fields[f"{marker.key}_unit"] = (str | None, marker.unit)
        fields[f"{marker.key}_flag"] = (str | None, None)
    for ratio in BLOOD_RATIOS:
        fields[ratio] = (float | None, None)
    fields["notes"] = (str, "")
    fields["attached_files"] = (list[dict], Field(default_factory=list))
    return fields


BloodEntry = create_model("BloodEntry", __base__=CamelModel, **_panel_fields())


class BloodOptimalRange(CamelModel):
    """The user's preferred target band for one marker."""

    marker_key: str = Field(min_length=1)
    min_value: float | None = None
    max_value: float | None = None
    unit: str | None = None
    notes: str = ""


BLOOD_ENTRIES = Resource(
    name="blood_entries",
    label="Blood entry",
    table="blood_entries",
    model=BloodEntry,
    order_by=(("as_of", True), ("created_at", True)),
)

BLOOD_OPTIMAL_RANGES = Resource(
    name="blood_optimal_ranges",
    label="Blood optimal range",
    table="blood_optimal_ranges",
    model=BloodOptimalRange,
    order_by=(("marker_key", False),),
    key_field="marker_key",
    server_fields=("updated_at",),
)
