"""Competition registry: the aggregate root over every registered car.

The registry owns all cars keyed by plate, guarantees that a plate is
registered at most once and answers the queries that span several cars
(model-range reports, owners of event winners, prizes of an owner).

Lookups that miss are reported as ``False``, ``None`` or an empty list.
Double registrations raise a :class:`DuplicateKeyError` subclass before
anything is mutated.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from car_competition import config
from car_competition.core.car import Car
from car_competition.core.errors import DuplicatePlateError
from car_competition.core.model_range import ModelRange
from car_competition.core.owner import Owner
from car_competition.core.prize import Prize

logger = logging.getLogger(__name__)


class Registry:
    """In-memory registry of competition cars.

    Args:
        model_ranges: Model-year buckets available to
            :meth:`cars_in_model_range`.  Defaults to the packaged
            ``model_ranges.yaml``.
    """

    def __init__(self, model_ranges: list[ModelRange] | None = None) -> None:
        if model_ranges is None:
            model_ranges = config.load_model_ranges()
        self._cars: dict[str, Car] = {}
        self._model_ranges: dict[str, ModelRange] = {r.label: r for r in model_ranges}

    # -- Cars -----------------------------------------------------------------

    def add_car(self, plate: str, brand: str, model_year: int) -> Car:
        """Register a new car with empty owner and prize histories.

        Raises:
            DuplicatePlateError: If *plate* is already registered.
        """
        if plate in self._cars:
            logger.info("Rejected car %s: plate already registered", plate)
            raise DuplicatePlateError(plate)
        car = Car(plate, brand, model_year)
        self._cars[plate] = car
        logger.debug("Registered car %s (%s %d)", plate, brand, model_year)
        return car

    def remove_car(self, plate: str) -> bool:
        """Delete a car together with its owners and prizes."""
        if self._cars.pop(plate, None) is None:
            return False
        logger.debug("Removed car %s", plate)
        return True

    def get_car(self, plate: str) -> Car | None:
        return self._cars.get(plate)

    def plates(self) -> list[str]:
        return list(self._cars)

    def purge_all(self) -> bool:
        """Delete every car.  Always succeeds."""
        count = len(self._cars)
        self._cars.clear()
        logger.debug("Purged %d cars", count)
        return True

    @property
    def model_range_labels(self) -> list[str]:
        return list(self._model_ranges)

    def __contains__(self, plate: object) -> bool:
        return plate in self._cars

    def __len__(self) -> int:
        return len(self._cars)

    def __iter__(self) -> Iterator[Car]:
        return iter(list(self._cars.values()))

    # -- Owners ---------------------------------------------------------------

    def add_owner(
        self,
        plate: str,
        year: int,
        name: str,
        tax_id: str,
        address: str,
        city: str,
        phone: str,
    ) -> Owner | None:
        """Record an owner for the car with *plate* in *year*.

        Returns:
            The new :class:`Owner`, or ``None`` if *plate* is unknown.

        Raises:
            DuplicateOwnerError: If the tax ID is already recorded for
                that car and year.
        """
        car = self._cars.get(plate)
        if car is None:
            return None
        return car.add_owner(year, name, tax_id, address, city, phone)

    def remove_owner(self, plate: str, year: int, tax_id: str) -> bool:
        car = self._cars.get(plate)
        return car is not None and car.remove_owner(year, tax_id)

    def remove_all_owners(self, plate: str, year: int | None = None) -> bool:
        """Clear the owners of one car, for one year or for all years."""
        car = self._cars.get(plate)
        return car is not None and car.remove_all_owners(year)

    def owner_tax_ids(self, plate: str, year: int) -> list[str]:
        car = self._cars.get(plate)
        return car.owner_tax_ids(year) if car is not None else []

    # -- Prizes ---------------------------------------------------------------

    def register_prize(
        self, plate: str, year: int, placement: int, event: str
    ) -> Prize | None:
        """Record a prize for the car with *plate*.

        Returns:
            The new :class:`Prize`, or ``None`` if *plate* is unknown.

        Raises:
            DuplicatePrizeError: If the car already holds a prize for
                *event* in *year*.
        """
        car = self._cars.get(plate)
        if car is None:
            return None
        return car.add_prize(event, year, placement)

    def remove_prize(self, plate: str, descriptor: str) -> bool:
        car = self._cars.get(plate)
        return car is not None and car.remove_prize(descriptor)

    def remove_all_prizes(self, plate: str) -> bool:
        car = self._cars.get(plate)
        return car is not None and car.remove_all_prizes()

    def prize_descriptors(self, plate: str) -> list[str]:
        car = self._cars.get(plate)
        return car.prize_descriptors() if car is not None else []

    # -- Queries --------------------------------------------------------------

    def cars_in_model_range(self, label: str) -> list[Car]:
        """Return the cars whose model year falls in the range *label*.

        Raises:
            ValueError: If *label* is not a configured range.
        """
        model_range = self._model_ranges.get(label)
        if model_range is None:
            raise ValueError(
                f"Unknown model range '{label}'. "
                f"Expected one of: {', '.join(self._model_ranges)}"
            )
        return [car for car in self._cars.values() if model_range.contains(car.model_year)]

    def prizes_of_car(self, plate: str) -> list[Prize]:
        car = self._cars.get(plate)
        return car.prizes if car is not None else []

    def owners_of_car_in_year(self, plate: str, year: int) -> list[Owner]:
        car = self._cars.get(plate)
        return car.owners_in_year(year) if car is not None else []

    def owners_winning_event(self, event: str, year: int) -> list[Owner]:
        """Owners, in *year*, of every car that won a prize at *event* in *year*."""
        owners: list[Owner] = []
        for car in self._cars.values():
            if car.has_prize(event, year):
                owners.extend(car.owners_in_year(year))
        return owners

    def prizes_of_owner(self, tax_id: str) -> list[Prize]:
        """Prizes won by cars while owned by *tax_id*.

        For each car the owner appears on, only the prizes from the year
        the owner is recorded under are collected.
        """
        prizes: list[Prize] = []
        for car in self._cars.values():
            year = car.year_of_ownership(tax_id)
            if year is not None:
                prizes.extend(car.prizes_in_year(year))
        return prizes

    def all_prizes(self) -> list[Prize]:
        return [prize for car in self._cars.values() for prize in car.prizes]
