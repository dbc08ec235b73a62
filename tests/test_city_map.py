from __future__ import annotations

from vaxqueue.city_map import render_city_row, render_map
from vaxqueue.models import City, Clinic, Household, Inhabitant
from vaxqueue.parse_inputs import build_registry
from vaxqueue.registration import register_for_shots

from conftest import person


def test_households_and_clinic_render() -> None:
    city = City(
        name="CityName",
        households=[
            Household(0, [Inhabitant("1", "Done", True, 40)]),
            Household(2, [Inhabitant("2", "Not", False, 40)]),
        ],
        clinics=[Clinic("Main", 1)],
    )
    assert render_city_row(city) == "F,C,H // CityName"


def test_empty_city_is_single_cell() -> None:
    assert render_city_row(City(name="Ghost")) == "x // Ghost"


def test_clinic_overrides_household_on_same_block() -> None:
    city = City(name="T", households=[Household(1, [Inhabitant("1", "A", False, 40)])], clinics=[Clinic("Main", 1)])
    assert render_city_row(city) == "x,C // T"


def test_later_household_overwrites_same_block() -> None:
    city = City(name="T", households=[
        Household(0, [Inhabitant("1", "A", False, 40)]),
        Household(0, [Inhabitant("2", "B", True, 40)]),
    ])
    assert render_city_row(city) == "F // T"


def test_townsville_map_after_registration(townsville) -> None:
    assert render_map(townsville) == ["x,C,x,H // Townsville"]
    register_for_shots(townsville)
    assert render_map(townsville) == ["x,C,x,F // Townsville"]


def test_map_rows_follow_input_order_and_are_repeatable() -> None:
    registry = build_registry({
        "Zed": {"households": [{"blockNum": 2, "inhabitants": [person("1", "A", 20)]}]},
        "Alpha": {"clinics": [{"name": "C", "blockNum": 0}]},
    })
    first = render_map(registry)
    assert first == ["x,x,H // Zed", "C // Alpha"]
    assert render_map(registry) == first
