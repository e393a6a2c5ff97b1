"""Error taxonomy for the nutrition diary."""


class TrackerError(Exception):
    """Base class for user-visible, non-fatal failures."""


class ValidationError(TrackerError):
    """Malformed or missing input to the calculator or an entry form."""


class DuplicateEntryError(TrackerError):
    """A daily entry already exists for the requested date."""

    def __init__(self, day: str) -> None:
        super().__init__(
            f"An entry for {day} already exists. Only one entry per day is allowed."
        )
        self.day = day


class ProfileNotFoundError(TrackerError):
    """No profile document exists for the user."""


class StoreUnavailableError(TrackerError):
    """The document store is unreachable or rejected the request."""


class AnalysisUnavailableError(TrackerError):
    """The text-completion service failed to produce an estimate."""
