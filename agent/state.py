"""
agent/state.py
Estado de la vista del analizador como máquina de estados cerrada:
IDLE -> BUSY -> {SUCCESS | FAILURE}
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from agent.models import ScenarioAnalysis


class Phase(Enum):
    IDLE = "idle"
    BUSY = "busy"
    SUCCESS = "success"
    FAILURE = "failure"


class FailureKind(Enum):
    CONFIGURATION_MISSING = "configuration_missing"
    SERVICE_FAILURE = "service_failure"


@dataclass(frozen=True)
class AnalyzerFailure:
    kind: FailureKind
    message: str


@dataclass(frozen=True)
class AnalyzerState:
    """
    Instantánea inmutable del analizador. Se construye solo con los métodos
    de clase, así `analysis` y `error` nunca conviven.
    """
    phase: Phase
    analysis: Optional[ScenarioAnalysis] = None
    error: Optional[AnalyzerFailure] = None

    @classmethod
    def idle(cls) -> "AnalyzerState":
        return cls(Phase.IDLE)

    @classmethod
    def busy(cls) -> "AnalyzerState":
        return cls(Phase.BUSY)

    @classmethod
    def succeeded(cls, analysis: ScenarioAnalysis) -> "AnalyzerState":
        return cls(Phase.SUCCESS, analysis=analysis)

    @classmethod
    def failed(cls, kind: FailureKind, message: str) -> "AnalyzerState":
        return cls(Phase.FAILURE, error=AnalyzerFailure(kind, message))

    @property
    def is_busy(self) -> bool:
        return self.phase is Phase.BUSY
