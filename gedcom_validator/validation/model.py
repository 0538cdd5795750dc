from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, Iterator, List, Optional, Union


class Severity(IntEnum):
    """Severity of a finding, ordered by importance (ERROR > WARNING > INFO)."""
    INFO = 1
    WARNING = 2
    ERROR = 3

    @classmethod
    def from_name(cls, name: Union[str, 'Severity']) -> 'Severity':
        """
        Parse a severity name such as 'warning' (case-insensitive).

        Raises:
            ValueError: If the name is not a known severity.
        """
        if isinstance(name, Severity):
            return name
        try:
            return cls[str(name).strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown severity '{name}', expected one of {[s.name.lower() for s in cls]}")


@dataclass(frozen=True)
class Finding:
    """
    A single defect (or repair) reported by a validation rule.

    Attributes:
        severity (Severity): How serious the finding is.
        message (str): Human-readable description.
        subject (Any): The exact object instance the finding is about.
    """
    severity: Severity
    message: str
    subject: Any = field(default=None, hash=False)

    def __str__(self) -> str:
        return f"{self.severity.name}: {self.message}"


class Findings:
    """
    Ordered collection of findings produced by one validation run.

    Attributes:
        min_severity (Severity): Lowest severity that counts as an issue for is_empty().
    """

    def __init__(self, min_severity: Union[str, Severity] = Severity.INFO) -> None:
        self.min_severity: Severity = Severity.from_name(min_severity)
        self._findings: List[Finding] = []

    def add(self, severity: Severity, message: str, subject: Any = None) -> Finding:
        """Append a finding and return it."""
        finding = Finding(severity=severity, message=message, subject=subject)
        self._findings.append(finding)
        return finding

    def has(self, severity: Severity, *keywords: str) -> bool:
        """
        Check for a finding of exactly this severity whose message contains every keyword.

        Keywords are matched as case-sensitive substrings and need not be contiguous.
        """
        return any(
            finding.severity == severity and all(keyword in finding.message for keyword in keywords)
            for finding in self._findings
        )

    def is_empty(self, min_severity: Optional[Union[str, Severity]] = None) -> bool:
        """
        Check that no finding of at least the given severity exists.

        Args:
            min_severity: Threshold; defaults to the collection's min_severity.
        """
        threshold = self.min_severity if min_severity is None else Severity.from_name(min_severity)
        return not any(finding.severity >= threshold for finding in self._findings)

    def clear(self) -> None:
        self._findings.clear()

    def with_severity(self, severity: Severity) -> List[Finding]:
        return [finding for finding in self._findings if finding.severity == severity]

    @property
    def errors(self) -> List[Finding]:
        return self.with_severity(Severity.ERROR)

    @property
    def warnings(self) -> List[Finding]:
        return self.with_severity(Severity.WARNING)

    @property
    def infos(self) -> List[Finding]:
        return self.with_severity(Severity.INFO)

    def counts(self) -> Dict[str, int]:
        """Number of findings per severity, keyed by lowercase severity name."""
        counts = {severity.name.lower(): 0 for severity in sorted(Severity, reverse=True)}
        for finding in self._findings:
            counts[finding.severity.name.lower()] += 1
        return counts

    def __iter__(self) -> Iterator[Finding]:
        return iter(list(self._findings))

    def __len__(self) -> int:
        return len(self._findings)

    def __getitem__(self, index: int) -> Finding:
        return self._findings[index]

    def __str__(self) -> str:
        return "\n".join(str(finding) for finding in self._findings)

    def __repr__(self) -> str:
        return f"Findings({self.counts()})"
