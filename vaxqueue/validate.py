"""
Dry-run checks and post-registration validation.
Advisory only: nothing here stops a run.
"""

from typing import Dict, List, Tuple

from .models import Registry, WAIT_MINUTES_PER_PERSON


def check_registry(registry: Registry) -> Tuple[bool, List[str]]:
    """
    Look for input quirks before registering.
    Returns (is_clean, list_of_messages).
    """
    msgs = []
    seen_phn: Dict[str, str] = {}

    for city_name, city in registry.cities.items():
        eligible = [
            p for h in city.households for p in h.inhabitants
            if not p.is_vaccinated and p.age >= registry.current_intake
        ]
        if not city.clinics and eligible:
            msgs.append(f"{city_name}: no clinics; {len(eligible)} eligible inhabitant(s) cannot be registered")

        household_blocks: Dict[int, int] = {}
        for h in city.households:
            household_blocks[h.block_num] = household_blocks.get(h.block_num, 0) + 1
        for block, cnt in sorted(household_blocks.items()):
            if cnt > 1:
                msgs.append(f"{city_name}: {cnt} households share block {block} (map shows the last one)")

        for clinic in city.clinics:
            if clinic.block_num in household_blocks:
                msgs.append(f"{city_name}: clinic {clinic.name} hides household at block {clinic.block_num} on the map")

    for city, h, p in registry.inhabitants():
        where = f"{city.name} block {h.block_num}"
        if p.phn in seen_phn:
            msgs.append(f"Duplicate PHN {p.phn}: {seen_phn[p.phn]} and {where}")
        else:
            seen_phn[p.phn] = where

    return len(msgs) == 0, msgs


def check_assignments(registry: Registry) -> Tuple[bool, List[str]]:
    """Every queued person is vaccinated and queued once; wait times match lineups."""
    violations = []
    queued: Dict[str, str] = {}

    for clinic in registry.clinics():
        for person in clinic.waiting():
            if not person.is_vaccinated:
                violations.append(f"{person.full_name}: queued at {clinic.name} but not marked vaccinated")
            if person.phn in queued:
                violations.append(f"{person.full_name}: queued at {queued[person.phn]} and {clinic.name}")
            else:
                queued[person.phn] = clinic.name

        # Recount from the queue contents, not from size()
        expected = len(clinic.waiting()) * WAIT_MINUTES_PER_PERSON
        if clinic.current_wait_time() != expected:
            violations.append(f"{clinic.name}: wait {clinic.current_wait_time()} min (expected {expected})")

    return len(violations) == 0, violations
