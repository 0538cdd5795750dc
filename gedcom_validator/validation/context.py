from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .model import Findings, Finding, Severity


@dataclass
class ValidationContext:
    """
    Per-run state shared by every rule: the repair policy and the findings collector.

    Attributes:
        autorepair (bool): Whether rules may fix defects in place.
        findings (Findings): Collector all rules report into.
    """
    autorepair: bool
    findings: Findings

    def add_error(self, message: str, subject: Any = None) -> Finding:
        return self.findings.add(Severity.ERROR, message, subject)

    def add_warning(self, message: str, subject: Any = None) -> Finding:
        return self.findings.add(Severity.WARNING, message, subject)

    def add_info(self, message: str, subject: Any = None) -> Finding:
        return self.findings.add(Severity.INFO, message, subject)
