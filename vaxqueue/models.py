"""
Data models for the VaxQueue intake system.
All structures mirror the city map JSON document (cities → households, clinics).
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, Iterator, List, Optional, Tuple


# 1 person in a clinic lineup = 15 min
WAIT_MINUTES_PER_PERSON = 15

# Intake round the tool ships with (minimum age for a shot)
DEFAULT_CURRENT_INTAKE = 50

# Map symbols
EMPTY_BLOCK = "x"
HOUSEHOLD_BLOCK = "H"
FULL_HOUSEHOLD_BLOCK = "F"
CLINIC_BLOCK = "C"
MAP_DELIMITER = ","


@dataclass
class Inhabitant:
    """One person, keyed by personal health number."""
    phn: str
    full_name: str
    is_vaccinated: bool = False
    age: int = 0


@dataclass
class Household:
    """Inhabitants living on one block. Block uniqueness is not enforced."""
    block_num: int
    inhabitants: List[Inhabitant] = field(default_factory=list)

    @property
    def fully_vaccinated(self) -> bool:
        return all(p.is_vaccinated for p in self.inhabitants)


@dataclass
class Clinic:
    """A clinic and its FIFO lineup."""
    name: str
    block_num: int
    staff: int = 0                    # stored only; no capacity semantics
    queue: Deque[Inhabitant] = field(default_factory=deque)

    def enqueue(self, person: Inhabitant) -> None:
        self.queue.append(person)

    def dequeue(self) -> Optional[Inhabitant]:
        """Pop the head of the lineup, or None when nobody is waiting."""
        if not self.queue:
            return None
        return self.queue.popleft()

    def size(self) -> int:
        return len(self.queue)

    def current_wait_time(self) -> int:
        return self.size() * WAIT_MINUTES_PER_PERSON

    def waiting(self) -> List[Inhabitant]:
        return list(self.queue)


@dataclass
class City:
    name: str
    households: List[Household] = field(default_factory=list)
    clinics: List[Clinic] = field(default_factory=list)


@dataclass
class IntakeConfig:
    """Run parameters supplied at startup."""
    current_intake: int = DEFAULT_CURRENT_INTAKE
    data_path: str = "data.json"


@dataclass
class Registry:
    """City name → City, plus the active intake threshold."""
    cities: Dict[str, City] = field(default_factory=dict)
    current_intake: int = DEFAULT_CURRENT_INTAKE

    def clinics(self) -> List[Clinic]:
        """Flat clinic list in city-then-clinic order."""
        flat = []
        for city in self.cities.values():
            flat.extend(city.clinics)
        return flat

    def inhabitants(self) -> Iterator[Tuple[City, Household, Inhabitant]]:
        for city in self.cities.values():
            for household in city.households:
                for person in household.inhabitants:
                    yield city, household, person
