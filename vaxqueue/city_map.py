"""
Block map of each city: one cell per block from 0 to the highest block used.

  x  empty block
  H  household with someone still unvaccinated
  F  household fully vaccinated
  C  clinic (drawn last, so it hides a household on the same block)
"""

from typing import List

from .models import (
    City, Registry,
    EMPTY_BLOCK, HOUSEHOLD_BLOCK, FULL_HOUSEHOLD_BLOCK, CLINIC_BLOCK, MAP_DELIMITER,
)


def city_cells(city: City) -> List[str]:
    blocks = [h.block_num for h in city.households] + [c.block_num for c in city.clinics]
    max_block = max(blocks + [0])

    cells = [EMPTY_BLOCK] * (max_block + 1)
    for household in city.households:
        cells[household.block_num] = FULL_HOUSEHOLD_BLOCK if household.fully_vaccinated else HOUSEHOLD_BLOCK
    for clinic in city.clinics:
        cells[clinic.block_num] = CLINIC_BLOCK
    return cells


def render_city_row(city: City) -> str:
    return f"{MAP_DELIMITER.join(city_cells(city))} // {city.name}"


def render_map(registry: Registry) -> List[str]:
    """One row per city, in registry order. Read-only."""
    return [render_city_row(city) for city in registry.cities.values()]
