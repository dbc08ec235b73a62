"""
Write the registration outcome to an Excel workbook.
CLINICS / QUEUE / NOTICES are plain tables; MAP is a colored block grid,
one row per city, one cell per block.
"""

from pathlib import Path
from typing import List, Optional

import openpyxl
import pandas as pd
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from .city_map import city_cells
from .models import (
    Registry, EMPTY_BLOCK, HOUSEHOLD_BLOCK, FULL_HOUSEHOLD_BLOCK, CLINIC_BLOCK,
)

CLINIC_COLUMNS = ["City", "Clinic", "Block", "Staff", "PeopleInLineup", "WaitMinutes"]
QUEUE_COLUMNS = ["Clinic", "Position", "PHN", "FullName", "Age"]

# ARGB, no '#'
BLOCK_COLORS = {
    EMPTY_BLOCK: "FFF1F5F9",
    HOUSEHOLD_BLOCK: "FFFDE68A",
    FULL_HOUSEHOLD_BLOCK: "FF86EFAC",
    CLINIC_BLOCK: "FF93C5FD",
}


def clinics_frame(registry: Registry) -> pd.DataFrame:
    """One row per clinic, city-then-clinic order."""
    rows = []
    for city_name, city in registry.cities.items():
        for clinic in city.clinics:
            rows.append({
                "City": city_name, "Clinic": clinic.name, "Block": clinic.block_num,
                "Staff": clinic.staff, "PeopleInLineup": clinic.size(),
                "WaitMinutes": clinic.current_wait_time(),
            })
    return pd.DataFrame(rows, columns=CLINIC_COLUMNS)


def queue_frame(registry: Registry) -> pd.DataFrame:
    rows = []
    for clinic in registry.clinics():
        for pos, person in enumerate(clinic.waiting(), 1):
            rows.append({
                "Clinic": clinic.name, "Position": pos, "PHN": person.phn,
                "FullName": person.full_name, "Age": person.age,
            })
    return pd.DataFrame(rows, columns=QUEUE_COLUMNS)


def _add_map_sheet(wb_path: Path, registry: Registry) -> None:
    wb = openpyxl.load_workbook(wb_path)
    if "MAP" in wb.sheetnames:
        del wb["MAP"]
    ws = wb.create_sheet("MAP")

    center = Alignment(horizontal="center", vertical="center")
    ws.cell(1, 1, "City").font = Font(bold=True)

    widest = 0
    for row_idx, city in enumerate(registry.cities.values(), 2):
        ws.cell(row_idx, 1, city.name).font = Font(bold=True)
        cells = city_cells(city)
        widest = max(widest, len(cells))
        for block, symbol in enumerate(cells):
            cell = ws.cell(row_idx, block + 2, symbol)
            cell.alignment = center
            color = BLOCK_COLORS[symbol]
            cell.fill = PatternFill(start_color=color, end_color=color, fill_type="solid")

    # Block number header
    for block in range(widest):
        c = ws.cell(1, block + 2, block)
        c.font = Font(bold=True, size=9)
        c.alignment = center
        ws.column_dimensions[get_column_letter(block + 2)].width = 4.5
    ws.column_dimensions["A"].width = 20
    ws.freeze_panes = "B2"

    wb.save(wb_path)


def write_report(
    registry: Registry,
    output_path: str,
    notices: Optional[List[str]] = None,
) -> str:
    """
    Write CLINICS, QUEUE, MAP and (when given) NOTICES sheets.
    Returns the output path.
    """
    output = Path(output_path)
    if not output.parent.exists():
        raise FileNotFoundError(f"Output directory not found: {output.parent}")

    with pd.ExcelWriter(output, engine="openpyxl") as w:
        clinics_frame(registry).to_excel(w, sheet_name="CLINICS", index=False)
        queue_frame(registry).to_excel(w, sheet_name="QUEUE", index=False)
        if notices is not None:
            pd.DataFrame({"Notice": notices}).to_excel(w, sheet_name="NOTICES", index=False)

    _add_map_sheet(output, registry)
    return str(output)
