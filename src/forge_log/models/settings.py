"""Navigation and profile settings rows, looked up by key."""

from pydantic import Field

from .base import CamelModel, Resource


class UserSettings(CamelModel):
    """Singleton profile settings."""

    current_body_weight: float | None = Field(default=None, gt=0)


class ShortcutSettings(CamelModel):
    """A home-screen shortcut."""

    shortcut_key: str = Field(min_length=1)
    label: str = Field(min_length=1)
    route: str = Field(min_length=1)
    is_visible: int = Field(default=1, ge=0, le=1)
    order: int = 0


class TabSettings(CamelModel):
    """A bottom-navigation tab."""

    tab_key: str = Field(min_length=1)
    label: str = Field(min_length=1)
    route: str = Field(min_length=1)
    is_visible: int = Field(default=1, ge=0, le=1)
    order: int = 0


USER_SETTINGS = Resource(
    name="user_settings",
    label="User settings",
    table="user_settings",
    model=UserSettings,
    server_fields=("updated_at",),
)

SHORTCUT_SETTINGS = Resource(
    name="shortcut_settings",
    label="Shortcut setting",
    table="shortcut_settings",
    model=ShortcutSettings,
    order_by=(("order", False), ("created_at", False)),
    key_field="shortcut_key",
)

TAB_SETTINGS = Resource(
    name="tab_settings",
    label="Tab setting",
    table="tab_settings",
    model=TabSettings,
    order_by=(("order", False), ("created_at", False)),
    key_field="tab_key",
)
