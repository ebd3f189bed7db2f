"""Error details domain model."""

from pydantic import BaseModel, ConfigDict


class ErrorDetails(BaseModel):
    """Loggable summary of a failed feed fetch."""

    model_config = ConfigDict(frozen=True)

    reason: str
    status_code: int | None = None
    kind: str | None = None  # Name of the FeedError subclass
    url: str | None = None

    def describe(self) -> str:
        """One-line description for log messages."""
        status = f", status: {self.status_code}" if self.status_code is not None else ""
        where = f" from {self.url}" if self.url else ""
        return f"{self.reason} ({self.kind or 'error'}{status}){where}"
