"""Prize record for the car competition registry."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Prize:
    """Placement a car achieved at an event in a given year.

    Attributes:
        event: Event name.  Compared case-sensitively.
        year: Year the event took place.
        placement: Finishing position (1 = winner).
    """

    event: str
    year: int
    placement: int

    def __post_init__(self) -> None:
        """Validate prize fields."""
        if not self.event:
            raise ValueError("event must not be empty.")
        if isinstance(self.year, bool) or not isinstance(self.year, int):
            raise ValueError("year must be an integer.")
        if self.year <= 0:
            raise ValueError("year must be > 0.")
        if isinstance(self.placement, bool) or not isinstance(self.placement, int):
            raise ValueError("placement must be an integer.")
        if self.placement < 1:
            raise ValueError("placement must be >= 1.")

    @property
    def key(self) -> tuple[str, int]:
        """Identity of the prize within a car: ``(event, year)``."""
        return (self.event, self.year)

    @property
    def descriptor(self) -> str:
        """Short text used to pick this prize out of a car's list."""
        return f"{self.event} {self.year}"

    def describe(self) -> str:
        return f"Event: {self.event}, Year: {self.year}, Placement: {self.placement}"
