"""Text boundary over the registry for line-oriented shells.

A text shell renders every report as one string and fills its pickers
from ``~``-joined lists.  :class:`RegistryTextAdapter` keeps that contract
on top of the structured :class:`~car_competition.core.registry.Registry`
API and folds the three possible results of a mutation into
:class:`Outcome`.
"""

from __future__ import annotations

import logging
from enum import Enum

from car_competition.core.errors import DuplicateKeyError
from car_competition.core.registry import Registry

logger = logging.getLogger(__name__)

ITEM_SEPARATOR: str = "~"


class Outcome(str, Enum):
    """Observable result of a mutation at the text boundary."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    DUPLICATE = "duplicate"


def join_items(items: list[str]) -> str:
    """Join picker items with :data:`ITEM_SEPARATOR`."""
    return ITEM_SEPARATOR.join(items)


def split_items(text: str) -> list[str]:
    """Split a ``~``-joined string; the empty string yields no items."""
    if not text:
        return []
    return text.split(ITEM_SEPARATOR)


def _outcome(found: bool) -> Outcome:
    return Outcome.SUCCESS if found else Outcome.NOT_FOUND


class RegistryTextAdapter:
    """String-returning facade over a :class:`Registry`.

    Attributes:
        registry: The wrapped registry.  Owned by the caller.
    """

    __slots__ = ("registry",)

    def __init__(self, registry: Registry) -> None:
        self.registry: Registry = registry

    # -- Mutations ------------------------------------------------------------

    def add_car(self, plate: str, brand: str, model_year: int) -> Outcome:
        try:
            self.registry.add_car(plate, brand, model_year)
        except DuplicateKeyError as exc:
            logger.debug("add_car rejected: %s", exc)
            return Outcome.DUPLICATE
        return Outcome.SUCCESS

    def remove_car(self, plate: str) -> Outcome:
        return _outcome(self.registry.remove_car(plate))

    def add_owner(
        self,
        plate: str,
        year: int,
        name: str,
        tax_id: str,
        address: str,
        city: str,
        phone: str,
    ) -> Outcome:
        try:
            owner = self.registry.add_owner(plate, year, name, tax_id, address, city, phone)
        except DuplicateKeyError as exc:
            logger.debug("add_owner rejected: %s", exc)
            return Outcome.DUPLICATE
        return _outcome(owner is not None)

    def remove_owner(self, plate: str, year: int, tax_id: str) -> Outcome:
        return _outcome(self.registry.remove_owner(plate, year, tax_id))

    def remove_all_owners(self, plate: str, year: int | None = None) -> Outcome:
        return _outcome(self.registry.remove_all_owners(plate, year))

    def register_prize(
        self, plate: str, year: int, placement: int, event: str
    ) -> Outcome:
        try:
            prize = self.registry.register_prize(plate, year, placement, event)
        except DuplicateKeyError as exc:
            logger.debug("register_prize rejected: %s", exc)
            return Outcome.DUPLICATE
        return _outcome(prize is not None)

    def remove_prize(self, plate: str, descriptor: str) -> Outcome:
        return _outcome(self.registry.remove_prize(plate, descriptor))

    def remove_all_prizes(self, plate: str) -> Outcome:
        return _outcome(self.registry.remove_all_prizes(plate))

    def purge_all(self) -> Outcome:
        return _outcome(self.registry.purge_all())

    # -- Reports --------------------------------------------------------------

    def cars_in_model_range(self, label: str) -> str:
        """Summary of every car in the model range, one block per car."""
        return "".join(str(car) for car in self.registry.cars_in_model_range(label))

    def prizes_of_car(self, plate: str) -> str:
        return "\n".join(p.describe() for p in self.registry.prizes_of_car(plate))

    def owners_of_car_in_year(self, plate: str, year: int) -> str:
        car = self.registry.get_car(plate)
        return car.owners_summary(year) if car is not None else ""

    def basic_owners_of_car_in_year(self, plate: str, year: int) -> str:
        car = self.registry.get_car(plate)
        return car.owners_basic_summary(year) if car is not None else ""

    def owners_winning_event(self, event: str, year: int) -> str:
        owners = self.registry.owners_winning_event(event, year)
        return "\n".join(owner.basic_info() for owner in owners)

    def prizes_of_owner(self, tax_id: str) -> str:
        return "\n".join(p.describe() for p in self.registry.prizes_of_owner(tax_id))

    def all_prizes(self) -> str:
        return "\n".join(p.describe() for p in self.registry.all_prizes())

    # -- Picker lists ---------------------------------------------------------

    def plates_concatenated(self) -> str:
        return join_items(self.registry.plates())

    def prizes_concatenated(self, plate: str) -> str:
        return join_items(self.registry.prize_descriptors(plate))

    def owners_concatenated(self, plate: str, year: int) -> str:
        return join_items(self.registry.owner_tax_ids(plate, year))
