"""Domain models - pure Python dataclasses"""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class ApiResponse:
    """Transient HTTP response consumed immediately by the caller"""

    status_code: int
    status_text: str
    body: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


@dataclass
class CaseResult:
    """Outcome of a single demo test case"""

    section: str
    name: str
    passed: bool


@dataclass
class DemoReport:
    """Results collected over one demo run"""

    results: List[CaseResult] = field(default_factory=list)

    def record(self, section: str, name: str, passed: bool) -> None:
        self.results.append(CaseResult(section=section, name=name, passed=passed))

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def failed(self) -> int:
        return self.total - self.passed

    def section_ok(self, section: str) -> bool:
        """True when every test case of the section completed without raising"""
        return all(r.passed for r in self.results if r.section == section)
