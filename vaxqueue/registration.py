"""
Registration pass: route every eligible, unvaccinated inhabitant to the
nearest clinic in their city and put them in its lineup.

Single pass, single writer. Iteration order is city → household → inhabitant
in document order, so notices come out in a stable order.
"""

from typing import Dict, List, Optional

from .models import Registry, Clinic


def find_nearest_clinic(clinics: List[Clinic], block_num: int) -> Optional[Clinic]:
    """
    Closest clinic by block distance |clinic.block_num - block_num|.
    Ties keep the earlier clinic. None when the list is empty.
    """
    nearest = None
    for clinic in clinics:
        if nearest is None or abs(clinic.block_num - block_num) < abs(nearest.block_num - block_num):
            nearest = clinic
    return nearest


def register_for_shots(registry: Registry, current_intake: Optional[int] = None) -> List[str]:
    """
    Enqueue eligible inhabitants and flip their vaccination flag.
    Returns the notices in the order they happened.

    current_intake overrides the registry's configured threshold.
    """
    if current_intake is None:
        current_intake = registry.current_intake
    notices = []

    for city, household, person in registry.inhabitants():
        if person.is_vaccinated or person.age < current_intake:
            continue
        clinic = find_nearest_clinic(city.clinics, household.block_num)
        if clinic is None:
            notices.append(
                f"No clinics available near household at block {household.block_num} in {city.name}")
            continue

        clinic.enqueue(person)
        person.is_vaccinated = True
        notices.append(f"{person.full_name} added to queue at {clinic.name}")

        # Fires once: only the last member to flip completes the household
        if household.fully_vaccinated:
            notices.append(
                f"All members of household at block {household.block_num} in {city.name} are vaccinated.")

    return notices


def summarize(registry: Registry) -> Dict[str, Dict[str, int]]:
    """Per-city counts: inhabitants, vaccinated, queued, fully vaccinated households."""
    summary = {}
    for city_name, city in registry.cities.items():
        people = [p for h in city.households for p in h.inhabitants]
        summary[city_name] = {
            "inhabitants": len(people),
            "vaccinated": sum(1 for p in people if p.is_vaccinated),
            "queued": sum(c.size() for c in city.clinics),
            "households": len(city.households),
            "households_complete": sum(1 for h in city.households if h.fully_vaccinated),
        }
    return summary
