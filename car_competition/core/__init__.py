"""Core data model of the car competition registry."""

from car_competition.core.car import Car
from car_competition.core.errors import (
    DuplicateKeyError,
    DuplicateOwnerError,
    DuplicatePlateError,
    DuplicatePrizeError,
    RegistryError,
)
from car_competition.core.model_range import ModelRange
from car_competition.core.owner import Owner
from car_competition.core.prize import Prize
from car_competition.core.registry import Registry

__all__ = [
    "Car",
    "DuplicateKeyError",
    "DuplicateOwnerError",
    "DuplicatePlateError",
    "DuplicatePrizeError",
    "ModelRange",
    "Owner",
    "Prize",
    "Registry",
    "RegistryError",
]
