"""Request bodies that are not entity payloads."""

from pydantic import Field

from ..models import CamelModel


class ReorderItem(CamelModel):
    """One entry of a bulk reorder request."""

    id: str = Field(min_length=1)
    order: int


class AttachmentRef(CamelModel):
    """Identifies an attachment to remove by its URL."""

    file_url: str = Field(min_length=1)


class SetCountUpdate(CamelModel):
    """Manual set count for today's progress on one exercise."""

    sets_completed: int = 0


class TemplateName(CamelModel):
    """Name to look up or create an exercise template for."""

    name: str
