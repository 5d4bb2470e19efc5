"""Tests for the cross-car registry queries."""

import pytest

from car_competition.core.model_range import ModelRange
from car_competition.core.registry import Registry

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

_LABELS: list[str] = ["2014-2012", "2011-2009", "2008-2006", "2005-Menor"]


def _partition_registry() -> Registry:
    registry = Registry()
    registry.add_car("P2015", "Renault", 2015)
    registry.add_car("P2011", "Mazda", 2011)
    registry.add_car("P2007", "Chevrolet", 2007)
    registry.add_car("P2001", "Fiat", 2001)
    return registry


def _add_owner(registry: Registry, plate: str, year: int, tax_id: str) -> None:
    registry.add_owner(plate, year, f"Owner {tax_id}", tax_id, "Cra 5", "Cucuta", "57")


# ---------------------------------------------------------------------------
# Model ranges
# ---------------------------------------------------------------------------


def test_model_range_partition() -> None:
    """Every car lands in exactly one of the fixed range labels."""
    registry = _partition_registry()
    expected = {
        "2014-2012": ["P2015"],
        "2011-2009": ["P2011"],
        "2008-2006": ["P2007"],
        "2005-Menor": ["P2001"],
    }
    seen: list[str] = []
    for label in _LABELS:
        plates = [car.plate for car in registry.cars_in_model_range(label)]
        assert plates == expected[label], label
        seen.extend(plates)
    assert sorted(seen) == sorted(registry.plates())


@pytest.mark.parametrize(
    ("model_year", "label"),
    [
        (2014, "2014-2012"),
        (2012, "2014-2012"),
        (2011, "2011-2009"),
        (2009, "2011-2009"),
        (2008, "2008-2006"),
        (2006, "2008-2006"),
        (2005, "2005-Menor"),
        (1990, "2005-Menor"),
    ],
)
def test_model_range_bounds_are_inclusive(model_year: int, label: str) -> None:
    """Range edges belong to their labelled range."""
    registry = Registry()
    registry.add_car("EDGE", "Renault", model_year)
    assert [c.plate for c in registry.cars_in_model_range(label)] == ["EDGE"]


def test_unknown_model_range_label() -> None:
    """An unconfigured label is rejected."""
    with pytest.raises(ValueError, match="Unknown model range"):
        Registry().cars_in_model_range("1999-1990")


def test_custom_model_ranges() -> None:
    """A registry can be built with its own range buckets."""
    registry = Registry(model_ranges=[ModelRange("Classic", newest=1980, oldest=None)])
    registry.add_car("OLD", "Ford", 1975)
    registry.add_car("NEW", "Ford", 2010)
    assert registry.model_range_labels == ["Classic"]
    assert [c.plate for c in registry.cars_in_model_range("Classic")] == ["OLD"]


# ---------------------------------------------------------------------------
# Prize and owner queries
# ---------------------------------------------------------------------------


def test_prizes_of_car_round_trip() -> None:
    """A registered prize is returned with its event, year and placement."""
    registry = Registry()
    registry.add_car("ABC123", "Renault", 2013)
    registry.register_prize("ABC123", 2012, 1, "Rally")
    prizes = registry.prizes_of_car("ABC123")
    assert len(prizes) == 1
    assert (prizes[0].event, prizes[0].year, prizes[0].placement) == ("Rally", 2012, 1)
    assert registry.prizes_of_car("NOPE") == []


def test_owners_winning_event() -> None:
    """Owners of the winning car in the event year are reported."""
    registry = Registry()
    registry.add_car("XYZ", "Mazda", 2010)
    registry.add_car("OTHER", "Fiat", 2009)
    _add_owner(registry, "XYZ", 2010, "111")
    _add_owner(registry, "XYZ", 2011, "999")
    _add_owner(registry, "OTHER", 2010, "555")
    registry.register_prize("XYZ", 2010, 1, "Expo")
    registry.register_prize("OTHER", 2010, 1, "Rally")

    owners = registry.owners_winning_event("Expo", 2010)
    assert [o.tax_id for o in owners] == ["111"]
    assert registry.owners_winning_event("Expo", 2011) == []
    assert registry.owners_winning_event("expo", 2010) == []


def test_owners_winning_event_spans_cars() -> None:
    """Owners from every car holding the prize are collected."""
    registry = Registry()
    registry.add_car("A", "Mazda", 2010)
    registry.add_car("B", "Fiat", 2009)
    _add_owner(registry, "A", 2012, "1")
    _add_owner(registry, "B", 2012, "2")
    _add_owner(registry, "B", 2012, "3")
    registry.register_prize("A", 2012, 1, "Rally")
    registry.register_prize("B", 2012, 2, "Rally")
    assert [o.tax_id for o in registry.owners_winning_event("Rally", 2012)] == [
        "1",
        "2",
        "3",
    ]


def test_prizes_of_owner_filters_by_ownership_year() -> None:
    """Only prizes from the year the owner held the car are counted."""
    registry = Registry()
    registry.add_car("A", "Mazda", 2010)
    registry.add_car("B", "Fiat", 2009)
    _add_owner(registry, "A", 2010, "Ab1")
    _add_owner(registry, "B", 2012, "ab1")
    registry.register_prize("A", 2010, 1, "Expo")
    registry.register_prize("A", 2011, 2, "Expo")
    registry.register_prize("B", 2012, 3, "Rally")
    registry.register_prize("B", 2013, 4, "Rally")

    prizes = registry.prizes_of_owner("AB1")
    assert [(p.event, p.year) for p in prizes] == [("Expo", 2010), ("Rally", 2012)]
    assert registry.prizes_of_owner("nobody") == []


def test_all_prizes_flattens_every_car() -> None:
    """Every prize across every car is returned in registration order."""
    registry = Registry()
    registry.add_car("A", "Mazda", 2010)
    registry.add_car("B", "Fiat", 2009)
    registry.register_prize("A", 2010, 1, "Expo")
    registry.register_prize("B", 2012, 3, "Rally")
    registry.register_prize("A", 2011, 2, "Expo")
    assert [(p.event, p.year) for p in registry.all_prizes()] == [
        ("Expo", 2010),
        ("Expo", 2011),
        ("Rally", 2012),
    ]
