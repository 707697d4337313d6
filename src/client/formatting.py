"""Display helpers for the volunteer profile page."""

from datetime import date, datetime

from src.api.core.constants import DESCRIPTION_MAX_LENGTH

SKILL_BADGE_STYLES = (
    "badge-primary",
    "badge-secondary",
    "badge-accent",
    "badge-info",
)

GENDER_LABELS = {
    "male": "Male",
    "female": "Female",
    "other": "Other",
}


def parse_skills(raw: str) -> list[str]:
    """Split a comma-separated skill string, keeping order and duplicates."""
    return [skill.strip() for skill in raw.split(",") if skill.strip()]


def join_skills(skills: list[str] | tuple[str, ...]) -> str:
    return ", ".join(skills)


def truncate_description(value: str) -> str:
    return value[:DESCRIPTION_MAX_LENGTH]


def normalize_privacy(value: str | None) -> str:
    return "private" if value == "private" else "public"


def format_gender(gender: str | None) -> str:
    if not gender:
        return "Not specified"

    value = gender.lower()
    if value in GENDER_LABELS:
        return GENDER_LABELS[value]

    return value[:1].upper() + value[1:]


def gender_badge_style(gender: str | None) -> str:
    if not gender:
        return "badge-outline"
    if gender == "male":
        return "badge-info"
    if gender == "female":
        return "badge-secondary"
    return "badge-accent"


def skill_badge_style(index: int) -> str:
    return SKILL_BADGE_STYLES[index % len(SKILL_BADGE_STYLES)]


def full_name(first_name: str | None, last_name: str | None) -> str:
    return f"{first_name or ''} {last_name or ''}".strip()


def initials(name: str) -> str:
    """First letter of up to the first two words, uppercased."""
    parts = name.split()
    return "".join(part[0].upper() for part in parts[:2])


def _parse_date(value: str) -> date | None:
    # Accepts plain dates as well as full timestamps
    try:
        return datetime.fromisoformat(value).date()
    except ValueError:
        return None


def format_date_of_birth(value: str | None) -> str:
    """Render a stored birth date in long form, or the raw value if unparseable."""
    if not value:
        return "-"

    parsed = _parse_date(value)
    if parsed is None:
        return value

    return f"{parsed.strftime('%B')} {parsed.day}, {parsed.year}"
