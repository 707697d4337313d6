"""State machine behind the volunteer profile editor.

The editor keeps two immutable snapshots: the last profile the server
confirmed (``committed``) and the in-progress form values (``draft``).
Entering edit mode and cancelling both re-derive the draft from the
committed profile; a successful save replaces the committed profile with
the server response.
"""

from dataclasses import dataclass, replace
from enum import Enum

from src.client import formatting
from src.client.api import (
    INVALID_RESPONSE_MESSAGE,
    ProfileApiClient,
    ProfileApiError,
)
from src.utils.logger import get_logger

logger = get_logger(__name__)

LOAD_ERROR_MESSAGE = "Failed to load profile"
SAVE_ERROR_MESSAGE = "Failed to save profile"
SAVE_SUCCESS_MESSAGE = "Profile changes saved."

FIELD_LABELS = {"cv": "CV"}


class EditorStatus(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    LOADED = "loaded"


class ViewMode(str, Enum):
    VIEWING = "viewing"
    EDITING = "editing"


@dataclass(frozen=True)
class VolunteerSnapshot:
    id: int
    first_name: str
    last_name: str
    email: str
    date_of_birth: str | None
    gender: str | None
    description: str


@dataclass(frozen=True)
class ProfileSnapshot:
    """Server-confirmed profile as returned by the profile endpoints."""

    volunteer: VolunteerSnapshot
    skills: tuple[str, ...]
    cv: str | None
    privacy: str | None
    unavailable_fields: tuple[str, ...]

    @classmethod
    def from_payload(cls, payload: dict) -> "ProfileSnapshot":
        volunteer = payload["volunteer"]
        return cls(
            volunteer=VolunteerSnapshot(
                id=volunteer["id"],
                first_name=volunteer.get("first_name") or "",
                last_name=volunteer.get("last_name") or "",
                email=volunteer.get("email") or "",
                date_of_birth=volunteer.get("date_of_birth"),
                gender=volunteer.get("gender"),
                description=volunteer.get("description") or "",
            ),
            skills=tuple(payload.get("skills") or ()),
            cv=payload.get("cv"),
            privacy=payload.get("privacy"),
            unavailable_fields=tuple(payload.get("unavailableFields") or ()),
        )


@dataclass(frozen=True)
class ProfileDraft:
    """Editable form values. Skills are kept as the raw comma-separated text."""

    description: str = ""
    skills: str = ""
    cv: str = ""
    privacy: str = "public"

    @classmethod
    def from_profile(cls, profile: ProfileSnapshot) -> "ProfileDraft":
        return cls(
            description=profile.volunteer.description,
            skills=formatting.join_skills(profile.skills),
            cv=profile.cv or "",
            privacy=formatting.normalize_privacy(profile.privacy),
        )

    def to_payload(self) -> dict:
        return {
            "description": self.description,
            "skills": formatting.parse_skills(self.skills),
            "cv": self.cv or None,
            "privacy": self.privacy,
        }


def _parse_profile(payload: dict) -> ProfileSnapshot:
    try:
        return ProfileSnapshot.from_payload(payload)
    except (KeyError, TypeError, AttributeError) as e:
        raise ProfileApiError(INVALID_RESPONSE_MESSAGE) from e


EDITABLE_FIELDS = ("description", "skills", "cv", "privacy")


class ProfileEditor:
    """Client-side controller for loading, editing and saving a profile."""

    def __init__(self, api: ProfileApiClient):
        self.api = api
        self.status = EditorStatus.LOADING
        self.mode = ViewMode.VIEWING
        self.committed: ProfileSnapshot | None = None
        self.draft = ProfileDraft()
        self.saving = False
        self.fetch_error: str | None = None
        self.save_error: str | None = None
        self.save_message: str | None = None

    async def load(self) -> None:
        self.status = EditorStatus.LOADING
        self.fetch_error = None
        try:
            committed = _parse_profile(await self.api.get_profile())
        except ProfileApiError as e:
            logger.warning(f"Failed to load volunteer profile: {e.message}")
            self.fetch_error = e.message or LOAD_ERROR_MESSAGE
            self.status = EditorStatus.ERROR
            return

        self.committed = committed
        self.draft = ProfileDraft.from_profile(self.committed)
        self.status = EditorStatus.LOADED

    async def retry(self) -> None:
        await self.load()

    def start_edit(self) -> None:
        if self.committed is None:
            return
        self.draft = ProfileDraft.from_profile(self.committed)
        self.mode = ViewMode.EDITING

    def update_field(self, field: str, value: str) -> None:
        if field not in EDITABLE_FIELDS:
            raise ValueError(f"Unknown profile field: {field}")
        if not self.is_field_available(field):
            return

        if field == "description":
            value = formatting.truncate_description(value)
        self.draft = replace(self.draft, **{field: value})
        self.save_error = None
        self.save_message = None

    def cancel(self) -> None:
        if self.committed is None:
            return
        self.draft = ProfileDraft.from_profile(self.committed)
        self.mode = ViewMode.VIEWING
        self.save_error = None
        self.save_message = None

    async def save(self) -> bool:
        """Submit the draft. Returns True when the server accepted it."""
        if self.mode != ViewMode.EDITING or self.committed is None:
            return False

        self.saving = True
        self.save_error = None
        self.save_message = None
        try:
            committed = _parse_profile(
                await self.api.update_profile(self.draft.to_payload())
            )
        except ProfileApiError as e:
            logger.warning(f"Failed to save volunteer profile: {e.message}")
            self.save_error = e.message or SAVE_ERROR_MESSAGE
            return False
        finally:
            self.saving = False

        self.committed = committed
        self.draft = ProfileDraft.from_profile(self.committed)
        self.save_message = SAVE_SUCCESS_MESSAGE
        self.mode = ViewMode.VIEWING
        return True

    def is_field_available(self, field: str) -> bool:
        if self.committed is None:
            return True
        return field not in self.committed.unavailable_fields

    @property
    def is_editing(self) -> bool:
        return self.mode == ViewMode.EDITING

    @property
    def parsed_skills(self) -> list[str]:
        return formatting.parse_skills(self.draft.skills)

    @property
    def unavailable_banner(self) -> str | None:
        if self.committed is None or not self.committed.unavailable_fields:
            return None
        labels = ", ".join(
            FIELD_LABELS.get(field, field) for field in self.committed.unavailable_fields
        )
        return f"Some profile fields are not configured in the current database: {labels}."

    @property
    def volunteer_name(self) -> str:
        if self.committed is None:
            return ""
        volunteer = self.committed.volunteer
        return formatting.full_name(volunteer.first_name, volunteer.last_name)

    @property
    def initials(self) -> str:
        return formatting.initials(self.volunteer_name) or "V"

    @property
    def gender_label(self) -> str:
        gender = self.committed.volunteer.gender if self.committed else None
        return formatting.format_gender(gender)

    @property
    def gender_badge(self) -> str:
        gender = self.committed.volunteer.gender if self.committed else None
        return formatting.gender_badge_style(gender)

    @property
    def date_of_birth_label(self) -> str:
        value = self.committed.volunteer.date_of_birth if self.committed else None
        return formatting.format_date_of_birth(value)

    @property
    def skill_badges(self) -> list[tuple[str, str]]:
        return [
            (skill, formatting.skill_badge_style(index))
            for index, skill in enumerate(self.parsed_skills)
        ]
