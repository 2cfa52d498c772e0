from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True, slots=True)
class KeyDiagnostic:
    """What the search learned about one candidate key."""

    key: int
    bad_bytes: int
    decoded: Optional[str] = None
    angle: Optional[float] = None

    @property
    def scored(self) -> bool:
        return self.angle is not None


@dataclass(frozen=True, slots=True)
class SearchOutcome:
    """Best key of a brute force search and its decode."""

    key: int
    angle: float
    plaintext: bytes
    text: str
    allowable_errors: int
    diagnostics: Tuple[KeyDiagnostic, ...] = field(default_factory=tuple)

    @property
    def scored_count(self) -> int:
        return sum(1 for d in self.diagnostics if d.scored)
