"""User registration and profile lookups."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID, uuid4

from nutrition_diary.domain.errors import ProfileNotFoundError, ValidationError
from nutrition_diary.domain.models import UserProfile
from nutrition_diary.services.entries import EntryStore


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    store: EntryStore

    def register(self, email: str, name: str) -> UserProfile:
        """Create a profile with an empty streak and return it."""
        cleaned_email = email.strip()
        cleaned_name = name.strip()
        if not cleaned_email or "@" not in cleaned_email:
            raise ValidationError("Please enter a valid email.")
        if not cleaned_name:
            raise ValidationError("Please enter your name.")

        profile = UserProfile(
            user_id=uuid4(),
            streak=0,
            last_date="",
            email=cleaned_email,
            name=cleaned_name,
            created_at=datetime.now(tz=UTC),
        )
        self.store.put_profile(
            profile.user_id,
            {
                "email": profile.email,
                "name": profile.name,
                "streak": profile.streak,
                "last_date": profile.last_date,
                "created_at": profile.created_at.isoformat(),
            },
        )
        return profile

    def get_profile(self, user_id: UUID) -> UserProfile:
        """Return the user's profile or raise ProfileNotFoundError."""
        profile = self.store.get_profile(user_id)
        if profile is None:
            raise ProfileNotFoundError(f"No profile for user {user_id}.")
        return profile
