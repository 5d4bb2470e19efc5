"""CLI entrypoint for the car competition registry."""

from __future__ import annotations

import argparse
import logging

from car_competition import __version__
from car_competition.core.registry import Registry
from car_competition.text import RegistryTextAdapter, split_items


def _seed(shell: RegistryTextAdapter) -> None:
    """Register a handful of sample cars, owners and prizes."""
    shell.add_car("ABC123", "Renault", 2013)
    shell.add_car("XYZ789", "Mazda", 2010)
    shell.add_car("KLM456", "Chevrolet", 2004)

    shell.add_owner("ABC123", 2013, "Ana Rojas", "1090", "Cra 5 #10-20", "Cucuta", "5712345")
    shell.add_owner("XYZ789", 2010, "Luis Pardo", "111", "Av 0 #3-15", "Pamplona", "5687654")
    shell.add_owner("XYZ789", 2012, "Marta Gil", "222", "Cll 9 #1-40", "Cucuta", "5761122")

    shell.register_prize("ABC123", 2013, 1, "Rally")
    shell.register_prize("XYZ789", 2010, 2, "Expo")
    shell.register_prize("XYZ789", 2012, 3, "Rally")


def main() -> None:
    """Run a demonstration of the registry and its text reports."""
    parser = argparse.ArgumentParser(description="Car competition registry demo")
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    print(f"Car Competition Registry v{__version__}")
    print("=" * 56)

    registry = Registry()
    shell = RegistryTextAdapter(registry)
    _seed(shell)

    plates = split_items(shell.plates_concatenated())
    print(f"\nRegistered plates: {', '.join(plates)}")

    # -- Uniqueness is enforced -----------------------------------------------
    outcome = shell.add_car("ABC123", "Fiat", 2001)
    print(f"Registering ABC123 twice -> {outcome.value}")

    # -- Reports --------------------------------------------------------------
    for label in registry.model_range_labels:
        print(f"\nCars with model between {label}")
        print(shell.cars_in_model_range(label) or "  (none)")

    for plate in plates:
        print(f"\nPrizes won by car - Plate: {plate}")
        print(shell.prizes_of_car(plate) or "  (none)")

    print("\nOwners of XYZ789 in 2010")
    print(shell.owners_of_car_in_year("XYZ789", 2010))

    print("\nOwners for the event Rally in 2013")
    print(shell.owners_winning_event("Rally", 2013))

    print("\nPrizes of the owner with tax ID 222")
    print(shell.prizes_of_owner("222"))

    print("\nAll prizes")
    print(shell.all_prizes())


if __name__ == "__main__":
    main()
