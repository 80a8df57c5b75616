"""Text sources the orchestrator extracts places from."""

from dataclasses import dataclass

DEFAULT_TOUR_LIMIT = 3


@dataclass(frozen=True)
class DescriptionSource:
    """A single free-form tour description. Every extracted city is used."""

    description: str

    @property
    def is_empty(self) -> bool:
        return not self.description


@dataclass(frozen=True)
class TourSource:
    """Tour name and schedule, searched in that order.

    With ``multi`` off only the first city of the winning field is used;
    with it on, up to ``limit`` cities are used.
    """

    name: str = ""
    schedule: str = ""
    multi: bool = False
    limit: int = DEFAULT_TOUR_LIMIT

    @property
    def name_text(self) -> str:
        return (self.name or "").strip()

    @property
    def schedule_text(self) -> str:
        return (self.schedule or "").strip()

    @property
    def is_empty(self) -> bool:
        return not self.name_text and not self.schedule_text


TextSource = DescriptionSource | TourSource
