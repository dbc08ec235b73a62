"""
Parse inputs for VaxQueue: reads the city map JSON document.
The document IS the source of truth: every city with its households and
clinics, in the order they appear.
"""

import json
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from .models import (
    Registry, City, Household, Inhabitant, Clinic, DEFAULT_CURRENT_INTAKE,
)
from .schemas import CityMapIn, CityIn


class LoadError(ValueError):
    """The city map could not be read or does not have the expected shape."""


def _build_city(name: str, data: CityIn) -> City:
    households = [
        Household(
            block_num=h.block_num,
            inhabitants=[
                Inhabitant(
                    phn=p.phn,
                    full_name=p.full_name,
                    is_vaccinated=p.is_vaccinated,
                    age=p.age,
                )
                for p in h.inhabitants
            ],
        )
        for h in data.households
    ]
    clinics = [Clinic(name=c.name, block_num=c.block_num, staff=c.staff) for c in data.clinics]
    return City(name=name, households=households, clinics=clinics)


def build_registry(data: Any, current_intake: int = DEFAULT_CURRENT_INTAKE) -> Registry:
    """
    Build the Registry from an already-parsed document.
    Raises LoadError when the document does not match the city map schema.
    """
    if not isinstance(data, dict):
        raise LoadError(f"City map must be a JSON object, got {type(data).__name__}")
    try:
        parsed = CityMapIn.model_validate(data)
    except ValidationError as e:
        raise LoadError(str(e)) from e

    cities = {}
    for name in parsed.city_names():
        cities[name] = _build_city(name, parsed.get(name))
    return Registry(cities=cities, current_intake=current_intake)


def load_registry(path: str, current_intake: Optional[int] = None) -> Registry:
    """
    Read and parse the JSON document at `path`.
    Unreadable files, non UTF-8 bytes and malformed JSON raise LoadError;
    nothing is recovered. Messages leave the path to the caller.
    """
    src = Path(path)
    try:
        text = src.read_text(encoding="utf-8")
    except OSError as e:
        raise LoadError(f"cannot read file ({e.strerror or e})") from e
    except UnicodeDecodeError as e:
        raise LoadError(f"not UTF-8 text ({e.reason} at byte {e.start})") from e
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise LoadError(f"invalid JSON: {e}") from e

    if current_intake is None:
        current_intake = DEFAULT_CURRENT_INTAKE
    return build_registry(data, current_intake=current_intake)
