"""Quotes, affirmations, thoughts and supplements."""

from pydantic import Field

from .base import CamelModel, Resource


class Quote(CamelModel):
    """A motivational quote."""

    text: str = Field(min_length=1)
    author: str = Field(min_length=1)
    category: str = "motivational"
    is_active: int = Field(default=1, ge=0, le=1)


class Affirmation(CamelModel):
    """A personal affirmation; only a handful are active at a time."""

    text: str = Field(min_length=1)
    category: str = "general"
    is_active: int = Field(default=0, ge=0, le=1)


class Thought(CamelModel):
    """A journal entry."""

    content: str = Field(min_length=1)
    mood: str = "neutral"
    tags: list[str] = Field(default_factory=lambda: ["RAY"])


class Supplement(CamelModel):
    """A supplement in the current stack."""

    name: str = Field(min_length=1)
    dosage: str = ""
    image_url: str = ""
    personal_notes: str = ""
    reference_url: str = ""
    order: int = 0


# Affirmations shown on the daily card at once.
MAX_ACTIVE_AFFIRMATIONS = 10

QUOTES = Resource(
    name="quotes",
    label="Quote",
    table="quotes",
    model=Quote,
)

AFFIRMATIONS = Resource(
    name="affirmations",
    label="Affirmation",
    table="affirmations",
    model=Affirmation,
)

THOUGHTS = Resource(
    name="thoughts",
    label="Thought",
    table="thoughts",
    model=Thought,
)

SUPPLEMENTS = Resource(
    name="supplements",
    label="Supplement",
    table="supplements",
    model=Supplement,
    order_by=(("order", False), ("created_at", True)),
)
