from __future__ import annotations

import json
from pathlib import Path

import pytest

from vaxqueue.parse_inputs import build_registry


def person(phn: str, name: str, age: int, vaccinated: bool = False) -> dict:
    return {"phn": phn, "fullName": name, "isVaccinated": vaccinated, "age": age}


def townsville_doc() -> dict:
    return {
        "Townsville": {
            "households": [{"blockNum": 3, "inhabitants": [person("100", "Tom Towns", 30)]}],
            "clinics": [{"name": "Main", "blockNum": 1, "staff": 2}],
        }
    }


@pytest.fixture
def townsville():
    return build_registry(townsville_doc(), current_intake=18)


@pytest.fixture
def write_doc(tmp_path: Path):
    def _write(doc, name: str = "data.json") -> Path:
        path = tmp_path / name
        path.write_text(doc if isinstance(doc, str) else json.dumps(doc), encoding="utf-8")
        return path
    return _write
