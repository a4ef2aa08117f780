"""Profile repository interface."""

from typing import Protocol

from cadence.core.tasks import Profile


class ProfileRepository(Protocol):
    """Interface for reading and updating the user's profile."""

    def get_profile(self) -> Profile | None:
        """Fetch the profile. Returns None if it doesn't exist yet."""
        ...

    def update_profile(self, **changes) -> Profile:
        """Apply partial changes and return the updated profile."""
        ...
