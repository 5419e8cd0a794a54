"""Form schema for user profiles."""

from __future__ import annotations

from pydantic import Field

from guide_admin.db.models.enums import ProfileVisibility
from guide_admin.schemas.common import FormModel, OptionalEmail, OptionalUrl


class PrivacySettingsForm(FormModel):
    profileVisibility: ProfileVisibility = ProfileVisibility.PUBLIC
    showLocation: bool = False
    showInterests: bool = False
    showAttendedEvents: bool = False


class ProfileForm(FormModel):
    """Validation rules for the admin profile edit form."""

    name: str = Field(default="", max_length=100)
    username: str = Field(
        default="",
        max_length=30,
        pattern=r"^$|^[A-Za-z0-9_.-]{3,30}$",
    )
    email: OptionalEmail = ""
    bio: str = Field(default="", max_length=500)
    location: str = Field(default="", max_length=200)
    avatarUrl: OptionalUrl = ""
    interests: list[str] = Field(default_factory=list, max_length=50)
    privacySettings: PrivacySettingsForm = Field(default_factory=PrivacySettingsForm)
