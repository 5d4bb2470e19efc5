"""Error taxonomy for the car competition registry.

Lookups that miss are not errors: they come back as ``False``, ``None``
or an empty list.  Only double registrations raise.
"""

from __future__ import annotations


class RegistryError(Exception):
    """Base class for all registry errors."""


class DuplicateKeyError(RegistryError, ValueError):
    """A record with the same identity key is already registered."""


class DuplicatePlateError(DuplicateKeyError):
    """A car with the given plate already exists in the registry."""

    def __init__(self, plate: str) -> None:
        super().__init__(f"Car with plate '{plate}' is already registered.")
        self.plate = plate


class DuplicateOwnerError(DuplicateKeyError):
    """An owner with the given tax ID is already registered for the year."""

    def __init__(self, plate: str, year: int, tax_id: str) -> None:
        super().__init__(
            f"Owner with tax ID '{tax_id}' already registered for car "
            f"'{plate}' in {year}."
        )
        self.plate = plate
        self.year = year
        self.tax_id = tax_id


class DuplicatePrizeError(DuplicateKeyError):
    """The car already holds a prize for the same event and year."""

    def __init__(self, plate: str, event: str, year: int) -> None:
        super().__init__(
            f"Car '{plate}' already holds a prize for '{event}' in {year}."
        )
        self.plate = plate
        self.event = event
        self.year = year
