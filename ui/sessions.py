"""
ui/sessions.py
Un ScenarioAnalyzer por sesión del navegador.
Cuando la pestaña se cierra, el analizador se cierra y su respuesta pendiente
(si la hay) se descarta.
"""
import logging
from typing import Callable, Dict

from agent.analyzer import ScenarioAnalyzer

logger = logging.getLogger(__name__)


class AnalyzerSessions:
    def __init__(self, factory: Callable[[], ScenarioAnalyzer]):
        self._factory = factory
        self._analyzers: Dict[str, ScenarioAnalyzer] = {}

    def get(self, session_id: str) -> ScenarioAnalyzer:
        analyzer = self._analyzers.get(session_id)
        if analyzer is None:
            analyzer = self._factory()
            self._analyzers[session_id] = analyzer
            logger.debug(f"Nueva sesión de análisis: {session_id}")
        return analyzer

    def close(self, session_id: str) -> None:
        analyzer = self._analyzers.pop(session_id, None)
        if analyzer is not None:
            analyzer.close()
            logger.debug(f"Sesión cerrada: {session_id}")

    def __len__(self) -> int:
        return len(self._analyzers)
