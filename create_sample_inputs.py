#!/usr/bin/env python3
"""Create a sample city map (data.json) for VaxQueue."""

import json
from pathlib import Path

BASE = Path(__file__).resolve().parent

# City → households (blockNum, inhabitants) and clinics (name, blockNum, staff)
city_map = {
    "Burnaby": {
        "households": [
            {"blockNum": 0, "inhabitants": [
                {"phn": "9876543210", "fullName": "Alice Chen", "isVaccinated": False, "age": 67},
                {"phn": "9876543211", "fullName": "Ben Chen", "isVaccinated": False, "age": 71},
            ]},
            {"blockNum": 3, "inhabitants": [
                {"phn": "9876543212", "fullName": "Carla Singh", "isVaccinated": True, "age": 55},
                {"phn": "9876543213", "fullName": "Dev Singh", "isVaccinated": False, "age": 24},
            ]},
            {"blockNum": 6, "inhabitants": [
                {"phn": "9876543214", "fullName": "Emma Roy", "isVaccinated": False, "age": 52},
            ]},
        ],
        "clinics": [
            {"name": "Metrotown Clinic", "blockNum": 1, "staff": 4},
            {"name": "Brentwood Clinic", "blockNum": 7, "staff": 2},
        ],
    },
    "Vancouver": {
        "households": [
            {"blockNum": 2, "inhabitants": [
                {"phn": "9876543215", "fullName": "Farid Haddad", "isVaccinated": False, "age": 80},
            ]},
            {"blockNum": 5, "inhabitants": [
                {"phn": "9876543216", "fullName": "Grace Lee", "isVaccinated": True, "age": 61},
            ]},
        ],
        "clinics": [
            {"name": "Kitsilano Clinic", "blockNum": 4, "staff": 3},
        ],
    },
    "Richmond": {
        "households": [
            {"blockNum": 1, "inhabitants": [
                {"phn": "9876543217", "fullName": "Hiro Tanaka", "isVaccinated": False, "age": 58},
            ]},
        ],
        "clinics": [],
    },
}

out = BASE / "data.json"
out.write_text(json.dumps(city_map, indent=2), encoding="utf-8")
print(f"Created: {out.name}")
