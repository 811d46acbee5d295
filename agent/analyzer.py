#!/usr/bin/env python3
"""
agent/analyzer.py
Analizador de escenarios: valida la entrada, hace UNA petición al servicio
de evaluación y convierte la respuesta (o el fallo) en estado de la vista.
"""

import asyncio
import logging
from typing import Optional

from agent.errors import ConfigurationMissing, ServiceFailure
from agent.llm_client import get_llm_client
from agent.models import decode_analysis
from agent.state import AnalyzerState, FailureKind
from config.gemini_config import AnalyzerConfig, validate_config

logger = logging.getLogger(__name__)

CONFIGURATION_MISSING_MESSAGE = "API Key not found. Please configure the environment."
SERVICE_FAILURE_MESSAGE = "分析過程中發生錯誤，請稍後再試。"


class ScenarioAnalyzer:
    def __init__(self, config: AnalyzerConfig, client=None):
        self.config = config
        self.state = AnalyzerState.idle()

        # Contador de generación: una respuesta tardía de una petición
        # superada (o de una vista cerrada) se descarta
        self._generation = 0
        self._closed = False

        self._config_error: Optional[ConfigurationMissing] = None
        try:
            validate_config(config)
        except ConfigurationMissing as e:
            logger.error(f"❌ Config validation failed: {e}")
            self._config_error = e

        if client is None and self._config_error is None:
            client = get_llm_client(config)
        self.client = client

    @property
    def busy(self) -> bool:
        return self.state.is_busy

    @property
    def configured(self) -> bool:
        return self._config_error is None

    def can_submit(self, text: Optional[str]) -> bool:
        """El botón solo está activo si no hay petición en curso y hay texto."""
        return not self.busy and bool(text and text.strip())

    async def submit(self, text: Optional[str]) -> Optional[AnalyzerState]:
        """
        Lanza un análisis.

        Returns:
            El nuevo estado, o None si el envío se ignora (texto vacío,
            petición en curso, analizador cerrado o respuesta obsoleta).
        """
        if self._closed:
            return None
        if not text or not text.strip():
            return None
        if self.busy:
            logger.warning("⚠️ Análisis en curso, se ignora el nuevo envío")
            return None

        if self._config_error is not None:
            self.state = AnalyzerState.failed(
                FailureKind.CONFIGURATION_MISSING, CONFIGURATION_MISSING_MESSAGE
            )
            return self.state

        self._generation += 1
        generation = self._generation
        self.state = AnalyzerState.busy()

        try:
            payload = await self.client.assess_scenario(text)
            outcome = AnalyzerState.succeeded(decode_analysis(payload))
        except asyncio.CancelledError:
            if generation == self._generation:
                self.state = AnalyzerState.idle()
            raise
        except ServiceFailure as e:
            logger.error(f"❌ Analysis failed: {e.reason}")
            outcome = AnalyzerState.failed(FailureKind.SERVICE_FAILURE, SERVICE_FAILURE_MESSAGE)
        except Exception as e:
            logger.error(f"❌ Analysis failed (unexpected): {e}", exc_info=True)
            outcome = AnalyzerState.failed(FailureKind.SERVICE_FAILURE, SERVICE_FAILURE_MESSAGE)

        if generation != self._generation:
            logger.info("🗑️ Respuesta obsoleta descartada")
            return None

        self.state = outcome
        return outcome

    def close(self) -> None:
        """La vista se ha cerrado: cualquier respuesta pendiente se descarta."""
        self._closed = True
        self._generation += 1
        self.state = AnalyzerState.idle()
