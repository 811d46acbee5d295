#!/usr/bin/env python3
"""
agent/llm_client.py
Cliente de Gemini para AI Sentinel.
Usa el SDK de OpenAI contra el endpoint compatible de Gemini.
"""

import logging
from typing import Dict

from openai import AsyncOpenAI, OpenAIError

from agent.errors import ServiceFailure
from agent.prompts import SYSTEM_INSTRUCTION, build_response_format, format_scenario_prompt
from config.gemini_config import AnalyzerConfig, validate_config

logger = logging.getLogger(__name__)


class GeminiLLMClient:
    """Cliente para la API de Gemini."""

    def __init__(self, config: AnalyzerConfig):
        validate_config(config)
        self.config = config

        # Sin reintentos: un envío del usuario es exactamente una petición
        self.client = AsyncOpenAI(
            base_url=config.base_url,
            api_key=config.api_key,
            max_retries=0,
        )
        logger.info(f"✅ Gemini LLM Client initialized ({config.model})")

    async def assess_scenario(self, scenario: str) -> str:
        """
        Pide la evaluación de riesgos de un escenario.

        Returns:
            El texto JSON devuelto por el modelo, sin decodificar.

        Raises:
            ServiceFailure: error de red/API o respuesta vacía.
        """
        logger.info(f"📞 LLM CALL: assess_scenario ({len(scenario)} chars)")
        try:
            response = await self.client.chat.completions.create(
                model=self.config.model,
                messages=[
                    {"role": "system", "content": SYSTEM_INSTRUCTION},
                    {"role": "user", "content": format_scenario_prompt(scenario)},
                ],
                response_format=build_response_format(),
            )
        except OpenAIError as e:
            raise ServiceFailure(f"{type(e).__name__}: {e}") from e

        if not response.choices:
            raise ServiceFailure("no choices in response")

        text = response.choices[0].message.content
        if not text:
            raise ServiceFailure("No response generated.")

        logger.info(f"✅ LLM RESPONSE: {len(text)} chars")
        return text


# Un cliente por configuración
_clients: Dict[AnalyzerConfig, GeminiLLMClient] = {}


def get_llm_client(config: AnalyzerConfig) -> GeminiLLMClient:
    """Devuelve el cliente compartido para esta configuración."""
    if config not in _clients:
        _clients[config] = GeminiLLMClient(config)
    return _clients[config]
