"""Car aggregate for the car competition registry.

A car owns two histories: the owners recorded for it in each year and the
prizes it has won at events.  Both are only ever mutated through the car,
which enforces the per-year owner and per-event prize uniqueness rules.
"""

from __future__ import annotations

import logging

from car_competition.core.errors import DuplicateOwnerError, DuplicatePrizeError
from car_competition.core.owner import Owner
from car_competition.core.prize import Prize

logger = logging.getLogger(__name__)


class Car:
    """A registered competition car identified by its plate.

    Equality and hashing use the plate alone, so two ``Car`` values with
    the same plate are the same entity whatever their other fields hold.

    Attributes:
        plate: Unique, read-only plate.
        brand: Car brand.
        model_year: Model year of the car.
    """

    __slots__ = ("_plate", "brand", "model_year", "_owners_by_year", "_prizes")

    def __init__(self, plate: str, brand: str, model_year: int) -> None:
        if not plate:
            raise ValueError("plate must not be empty.")
        if not brand:
            raise ValueError("brand must not be empty.")
        if isinstance(model_year, bool) or not isinstance(model_year, int):
            raise ValueError("model_year must be an integer.")
        self._plate: str = plate
        self.brand: str = brand
        self.model_year: int = model_year
        self._owners_by_year: dict[int, list[Owner]] = {}
        self._prizes: list[Prize] = []

    @property
    def plate(self) -> str:
        return self._plate

    # ------------------------------------------------------------------
    # Ownership history
    # ------------------------------------------------------------------

    def add_owner(
        self,
        year: int,
        name: str,
        tax_id: str,
        address: str,
        city: str,
        phone: str,
    ) -> Owner:
        """Record an owner of this car for *year*.

        Owners within a year keep their insertion order.

        Returns:
            The newly created :class:`Owner`.

        Raises:
            DuplicateOwnerError: If an owner with the same tax ID
                (case-insensitive) is already recorded for *year*.
            ValueError: If *year* is not an integer or any owner field
                is empty.
        """
        if isinstance(year, bool) or not isinstance(year, int):
            raise ValueError("year must be an integer.")
        if self._find_owner(year, tax_id) is not None:
            logger.info(
                "Rejected owner %s for car %s in %d: already registered",
                tax_id,
                self._plate,
                year,
            )
            raise DuplicateOwnerError(self._plate, year, tax_id)

        owner = Owner(name=name, tax_id=tax_id, address=address, city=city, phone=phone)
        self._owners_by_year.setdefault(year, []).append(owner)
        logger.debug("Added owner %s to car %s for %d", tax_id, self._plate, year)
        return owner

    def remove_owner(self, year: int, tax_id: str) -> bool:
        """Remove the owner with *tax_id* from *year*.

        Returns:
            False if the year has no bucket or no such owner, else True.
        """
        owner = self._find_owner(year, tax_id)
        if owner is None:
            return False
        self._owners_by_year[year].remove(owner)
        logger.debug("Removed owner %s from car %s for %d", tax_id, self._plate, year)
        return True

    def remove_all_owners(self, year: int | None = None) -> bool:
        """Clear owners for one year, or for every year when *year* is None.

        Clearing one year keeps its key: an emptied bucket stays present.
        Clearing every year drops all the buckets.

        Returns:
            With a year, True only if that bucket existed and held owners.
            Without a year, always True.
        """
        if year is None:
            self._owners_by_year.clear()
            logger.debug("Cleared every ownership year of car %s", self._plate)
            return True

        owners = self._owners_by_year.get(year)
        if not owners:
            return False
        owners.clear()
        logger.debug("Cleared owners of car %s for %d", self._plate, year)
        return True

    def owner_exists(self, tax_id: str) -> bool:
        """Return True if *tax_id* owns or has owned this car in any year."""
        return self.year_of_ownership(tax_id) is not None

    def year_of_ownership(self, tax_id: str) -> int | None:
        """Return the first year (bucket creation order) listing *tax_id*."""
        for year, owners in self._owners_by_year.items():
            if any(owner.matches(tax_id) for owner in owners):
                return year
        return None

    def owner_bucket_count(self) -> int:
        """Number of year buckets present, emptied ones included."""
        return len(self._owners_by_year)

    def owners_in_year(self, year: int) -> list[Owner]:
        return list(self._owners_by_year.get(year, ()))

    def owner_tax_ids(self, year: int) -> list[str]:
        return [owner.tax_id for owner in self._owners_by_year.get(year, ())]

    def owners_summary(self, year: int) -> str:
        """Full detail of every owner for *year*, one per line."""
        return "\n".join(owner.describe() for owner in self.owners_in_year(year))

    def owners_basic_summary(self, year: int) -> str:
        """Abbreviated detail of every owner for *year*, one per line."""
        return "\n".join(owner.basic_info() for owner in self.owners_in_year(year))

    def _find_owner(self, year: int, tax_id: str) -> Owner | None:
        for owner in self._owners_by_year.get(year, ()):
            if owner.matches(tax_id):
                return owner
        return None

    # ------------------------------------------------------------------
    # Prizes
    # ------------------------------------------------------------------

    @property
    def prizes(self) -> list[Prize]:
        return list(self._prizes)

    def add_prize(self, event: str, year: int, placement: int) -> Prize:
        """Record a prize won by this car.

        Raises:
            DuplicatePrizeError: If the car already holds a prize for the
                same event (case-sensitive) and year.
            ValueError: If a prize field is invalid.
        """
        if self.has_prize(event, year):
            logger.info(
                "Rejected prize %s/%d for car %s: already registered",
                event,
                year,
                self._plate,
            )
            raise DuplicatePrizeError(self._plate, event, year)

        prize = Prize(event=event, year=year, placement=placement)
        self._prizes.append(prize)
        logger.debug("Added prize %s/%d to car %s", event, year, self._plate)
        return prize

    def has_prize(self, event: str, year: int) -> bool:
        return any(prize.key == (event, year) for prize in self._prizes)

    def prizes_in_year(self, year: int) -> list[Prize]:
        return [prize for prize in self._prizes if prize.year == year]

    def prize_descriptors(self) -> list[str]:
        return [prize.descriptor for prize in self._prizes]

    def remove_prize(self, descriptor: str) -> bool:
        """Remove the prize whose :attr:`Prize.descriptor` equals *descriptor*."""
        for prize in self._prizes:
            if prize.descriptor == descriptor:
                self._prizes.remove(prize)
                logger.debug("Removed prize %s from car %s", descriptor, self._plate)
                return True
        return False

    def remove_all_prizes(self) -> bool:
        """Clear every prize; False if there was nothing to clear."""
        if not self._prizes:
            return False
        self._prizes.clear()
        logger.debug("Cleared prizes of car %s", self._plate)
        return True

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Car):
            return NotImplemented
        return self._plate == other._plate

    def __hash__(self) -> int:
        return hash(self._plate)

    def __str__(self) -> str:
        return f"Plate: {self._plate}\nBrand: {self.brand}\nModel: {self.model_year}\n"

    def __repr__(self) -> str:
        return (
            f"Car(plate={self._plate!r}, brand={self.brand!r}, "
            f"model_year={self.model_year})"
        )
