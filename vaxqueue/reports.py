"""
Clinic reports. Two interchangeable styles over the same flat clinic list:

  simple   lineup size per clinic
  complex  wait time + lineup size per clinic

ReportMaker holds whichever style the caller picked and forwards to it.
"""

from typing import Callable, Dict, List, Protocol

from .models import Clinic


class Report(Protocol):
    def lines(self) -> List[str]: ...

    def print_details(self, echo: Callable[[str], None] = print) -> None: ...


def _lineup(clinic: Clinic) -> str:
    return f"{clinic.name} - {clinic.size()} People In Lineup"


class SimpleReport:
    def __init__(self, clinics: List[Clinic]):
        self._clinics = clinics

    def lines(self) -> List[str]:
        out = ["Simple Report:"]
        for clinic in self._clinics:
            out.append(_lineup(clinic))
        return out

    def print_details(self, echo: Callable[[str], None] = print) -> None:
        for line in self.lines():
            echo(line)


class ComplexReport:
    def __init__(self, clinics: List[Clinic]):
        self._clinics = clinics

    def lines(self) -> List[str]:
        out = ["Complex Report:"]
        for clinic in self._clinics:
            out.append(f"Average Wait Time at {clinic.name}: {clinic.current_wait_time()} min")
            out.append(_lineup(clinic))
        return out

    def print_details(self, echo: Callable[[str], None] = print) -> None:
        for line in self.lines():
            echo(line)


class ReportMaker:
    """Forwards to the report it was given; swap styles without branching."""

    def __init__(self, report: Report):
        self.report = report

    def lines(self) -> List[str]:
        return self.report.lines()

    def print_details(self, echo: Callable[[str], None] = print) -> None:
        self.report.print_details(echo)


REPORT_STYLES: Dict[str, Callable[[List[Clinic]], Report]] = {
    "simple": SimpleReport,
    "complex": ComplexReport,
}
