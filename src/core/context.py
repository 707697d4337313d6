"""Authentication context model for typed volunteer authentication."""

from dataclasses import dataclass

from src.database.models.volunteers import VolunteerAccount


@dataclass
class AuthenticatedVolunteerContext:
    """Context containing the authenticated volunteer."""

    volunteer: VolunteerAccount

    def __post_init__(self):
        if not self.volunteer:
            raise ValueError("Volunteer is required in authentication context")
