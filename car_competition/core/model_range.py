"""Model-year buckets used to group cars in range reports."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ModelRange:
    """Inclusive span of model years identified by a display label.

    Attributes:
        label: Label shown to the user (e.g. ``"2011-2009"``).
        newest: Latest model year in the span, or ``None`` for no upper
            bound.
        oldest: Earliest model year in the span, or ``None`` for no lower
            bound.
    """

    label: str
    newest: int | None
    oldest: int | None

    def __post_init__(self) -> None:
        """Validate range bounds."""
        if not self.label:
            raise ValueError("label must not be empty.")
        if (
            self.newest is not None
            and self.oldest is not None
            and self.newest < self.oldest
        ):
            raise ValueError(
                f"Range '{self.label}': newest ({self.newest}) must be >= "
                f"oldest ({self.oldest})."
            )

    def contains(self, model_year: int) -> bool:
        """Return True if *model_year* falls inside this range."""
        if self.newest is not None and model_year > self.newest:
            return False
        if self.oldest is not None and model_year < self.oldest:
            return False
        return True
