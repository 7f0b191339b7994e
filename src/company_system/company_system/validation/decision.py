from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import ErrorKind


@dataclass(frozen=True)
class Decision:
    """Outcome of a validation: accepted, or rejected with a kind and a readable reason."""

    accepted: bool
    kind: Optional[ErrorKind] = None
    reason: str = ""

    @classmethod
    def accept(cls) -> "Decision":
        return cls(accepted=True)

    @classmethod
    def reject(cls, kind: ErrorKind, reason: str) -> "Decision":
        return cls(accepted=False, kind=kind, reason=reason)


ACCEPTED = Decision.accept()


@dataclass(frozen=True)
class OperationResult:
    """What a service mutation returns: the decision, plus the new key when a row was created."""

    decision: Decision
    key: Optional[object] = None

    @property
    def accepted(self) -> bool:
        return self.decision.accepted
