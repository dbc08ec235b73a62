from __future__ import annotations

import openpyxl
import pytest

from vaxqueue.registration import register_for_shots
from vaxqueue.write_report import clinics_frame, queue_frame, write_report


def test_frames(townsville) -> None:
    register_for_shots(townsville)
    clinics = clinics_frame(townsville)
    assert clinics.to_dict("records") == [{
        "City": "Townsville", "Clinic": "Main", "Block": 1, "Staff": 2,
        "PeopleInLineup": 1, "WaitMinutes": 15,
    }]
    queue = queue_frame(townsville)
    assert list(queue["FullName"]) == ["Tom Towns"]
    assert list(queue["Position"]) == [1]


def test_write_report_sheets(townsville, tmp_path) -> None:
    notices = register_for_shots(townsville)
    out = write_report(townsville, str(tmp_path / "report.xlsx"), notices=notices)

    wb = openpyxl.load_workbook(out)
    assert wb.sheetnames == ["CLINICS", "QUEUE", "NOTICES", "MAP"]

    ws = wb["CLINICS"]
    assert [c.value for c in ws[1]] == ["City", "Clinic", "Block", "Staff", "PeopleInLineup", "WaitMinutes"]
    assert [c.value for c in ws[2]] == ["Townsville", "Main", 1, 2, 1, 15]

    assert wb["NOTICES"].cell(2, 1).value == "Tom Towns added to queue at Main"

    ws_map = wb["MAP"]
    assert ws_map.cell(2, 1).value == "Townsville"
    assert [ws_map.cell(2, col).value for col in range(2, 6)] == ["x", "C", "x", "F"]
    assert [ws_map.cell(1, col).value for col in range(2, 6)] == [0, 1, 2, 3]


def test_write_report_without_notices_or_queue(townsville, tmp_path) -> None:
    out = write_report(townsville, str(tmp_path / "empty.xlsx"))
    wb = openpyxl.load_workbook(out)
    assert "NOTICES" not in wb.sheetnames
    assert wb["QUEUE"].max_row == 1


def test_write_report_missing_directory(townsville, tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        write_report(townsville, str(tmp_path / "nope" / "report.xlsx"))
