"""
Configuración de pytest y fixtures compartidas
"""
import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from config.gemini_config import AnalyzerConfig

SCENARIO = "我使用 ChatGPT 整理包含客戶姓名的會議記錄"

VALID_RESPONSE = {
    "riskLevel": "HIGH",
    "summary": "會議記錄包含客戶個資，輸入公開 AI 服務有外洩風險。",
    "threats": [{"title": "A", "description": "B"}],
    "recommendations": [{"title": "C", "action": "D"}],
}


@pytest.fixture
def valid_payload() -> str:
    return json.dumps(VALID_RESPONSE, ensure_ascii=False)


@pytest.fixture
def config() -> AnalyzerConfig:
    return AnalyzerConfig(
        api_key="test-key",
        model="gemini-test",
        base_url="https://example.invalid/v1beta/openai/",
    )


@pytest.fixture
def missing_config() -> AnalyzerConfig:
    return AnalyzerConfig(api_key="")


@pytest.fixture
def fake_client(valid_payload):
    """Cliente falso con la misma interfaz que GeminiLLMClient."""
    client = MagicMock()
    client.assess_scenario = AsyncMock(return_value=valid_payload)
    return client


@pytest.fixture
def valid_response() -> dict:
    return json.loads(json.dumps(VALID_RESPONSE))
