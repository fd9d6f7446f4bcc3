"""
Validation outcome and report structures.
"""
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Union

from pdf_verify.core.constants import GENERAL_FIELD


@dataclass(frozen=True)
class Finding:
    """An expectation that was not met.

    ``message`` is a string for scalar fields and the list of missing
    phrases for ``textPhrases``.
    """
    field: str
    message: Union[str, List[str]]


@dataclass(frozen=True)
class LocalFailure:
    """A validator raised instead of producing a finding."""
    field: str
    error: BaseException


class ValidationReport(Dict[str, Any]):
    """Result of one validation call, keyed by field name.

    Three shapes are possible:
    - ``{}``: nothing to check, or every expectation is met
    - ``{field: payload, ...}``: one or more content mismatches
    - ``{"general": error}``: validation could not run at all
    """

    @classmethod
    def from_findings(cls, findings: Iterable[Finding]) -> "ValidationReport":
        return cls((finding.field, finding.message) for finding in findings)

    @classmethod
    def from_failure(cls, error: BaseException) -> "ValidationReport":
        return cls({GENERAL_FIELD: error})

    @property
    def general(self) -> Optional[BaseException]:
        """Captured pipeline failure, if validation could not be completed."""
        return self.get(GENERAL_FIELD)

    @property
    def is_complete(self) -> bool:
        """True when field-level validation ran (there may still be findings)."""
        return GENERAL_FIELD not in self

    @property
    def has_errors(self) -> bool:
        return len(self) > 0

    def __repr__(self) -> str:
        return f"ValidationReport({dict.__repr__(self)})"
