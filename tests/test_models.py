from __future__ import annotations

from vaxqueue.models import Clinic, Household, Inhabitant, Registry, City, WAIT_MINUTES_PER_PERSON


def _people(n: int) -> list[Inhabitant]:
    return [Inhabitant(phn=str(i), full_name=f"Person {i}", age=40) for i in range(n)]


def test_queue_is_first_in_first_out() -> None:
    clinic = Clinic(name="Main", block_num=0)
    a, b, c = _people(3)
    for p in (a, b, c):
        clinic.enqueue(p)
    assert clinic.size() == 3
    assert clinic.dequeue() is a
    assert clinic.dequeue() is b
    assert clinic.waiting() == [c]


def test_dequeue_on_empty_returns_none() -> None:
    clinic = Clinic(name="Main", block_num=0)
    assert clinic.dequeue() is None
    clinic.enqueue(_people(1)[0])
    clinic.dequeue()
    assert clinic.dequeue() is None
    assert clinic.size() == 0


def test_wait_time_tracks_live_queue() -> None:
    clinic = Clinic(name="Main", block_num=0, staff=5)
    assert clinic.current_wait_time() == 0
    for i, p in enumerate(_people(4), 1):
        clinic.enqueue(p)
        assert clinic.current_wait_time() == i * WAIT_MINUTES_PER_PERSON
    clinic.dequeue()
    assert clinic.current_wait_time() == 3 * 15
    assert clinic.current_wait_time() == clinic.size() * 15


def test_household_fully_vaccinated() -> None:
    a, b = _people(2)
    household = Household(block_num=2, inhabitants=[a, b])
    assert not household.fully_vaccinated
    a.is_vaccinated = True
    assert not household.fully_vaccinated
    b.is_vaccinated = True
    assert household.fully_vaccinated
    assert Household(block_num=0).fully_vaccinated


def test_registry_flattens_clinics_in_city_order() -> None:
    registry = Registry(cities={
        "A": City(name="A", clinics=[Clinic("A1", 0), Clinic("A2", 1)]),
        "B": City(name="B"),
        "C": City(name="C", clinics=[Clinic("C1", 4)]),
    })
    assert [c.name for c in registry.clinics()] == ["A1", "A2", "C1"]
