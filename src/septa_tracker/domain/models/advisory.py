"""Service advisory domain models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Advisory:
    """A planned-service advisory. Titles are not guaranteed unique."""

    title: str
    dates_affected: str
    description: str

    @property
    def is_link(self) -> bool:
        """True when the description is a link rather than prose."""
        return self.description.startswith(("http://", "https://"))


@dataclass(frozen=True)
class AdvisoryFeed:
    """Current alerts plus planned advisories."""

    current: list[str] | None = None
    advisories: list[Advisory] = field(default_factory=list)
