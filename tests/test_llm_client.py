from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from openai import OpenAIError

from agent.errors import ConfigurationMissing, ServiceFailure
from agent.llm_client import GeminiLLMClient, get_llm_client
from agent.prompts import RESPONSE_SCHEMA, RESPONSE_SCHEMA_NAME, SYSTEM_INSTRUCTION


def completion(content):
    """Respuesta mínima con la forma de ChatCompletion."""
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


@pytest.fixture
def llm(config):
    client = GeminiLLMClient(config)
    client.client = MagicMock()
    return client


@pytest.mark.asyncio
async def test_assess_scenario_returns_raw_text(llm, valid_payload):
    llm.client.chat.completions.create = AsyncMock(return_value=completion(valid_payload))

    assert await llm.assess_scenario("escenario") == valid_payload


@pytest.mark.asyncio
async def test_request_carries_prompt_persona_and_schema(llm, valid_payload):
    create = AsyncMock(return_value=completion(valid_payload))
    llm.client.chat.completions.create = create
    scenario = "我使用 ChatGPT 整理包含客戶姓名的會議記錄"

    await llm.assess_scenario(scenario)

    create.assert_awaited_once()
    kwargs = create.await_args.kwargs
    assert kwargs["model"] == "gemini-test"

    system, user = kwargs["messages"]
    assert system == {"role": "system", "content": SYSTEM_INSTRUCTION}
    assert user["role"] == "user"
    assert f'"{scenario}"' in user["content"]
    for topic in ("data privacy", "intellectual property", "compliance"):
        assert topic in user["content"]

    response_format = kwargs["response_format"]
    assert response_format["type"] == "json_schema"
    assert response_format["json_schema"]["name"] == RESPONSE_SCHEMA_NAME
    assert response_format["json_schema"]["schema"] is RESPONSE_SCHEMA


def test_system_instruction_asks_for_traditional_chinese():
    assert "Traditional Chinese" in SYSTEM_INSTRUCTION
    assert "consultant" in SYSTEM_INSTRUCTION


def test_schema_requires_all_fields():
    assert RESPONSE_SCHEMA["required"] == ["riskLevel", "summary", "threats", "recommendations"]
    assert RESPONSE_SCHEMA["properties"]["riskLevel"]["enum"] == ["LOW", "MEDIUM", "HIGH", "CRITICAL"]
    assert RESPONSE_SCHEMA["properties"]["threats"]["items"]["required"] == ["title", "description"]
    assert RESPONSE_SCHEMA["properties"]["recommendations"]["items"]["required"] == ["title", "action"]


@pytest.mark.asyncio
@pytest.mark.parametrize("content", [None, ""])
async def test_empty_content_is_service_failure(llm, content):
    llm.client.chat.completions.create = AsyncMock(return_value=completion(content))

    with pytest.raises(ServiceFailure):
        await llm.assess_scenario("escenario")


@pytest.mark.asyncio
async def test_no_choices_is_service_failure(llm):
    llm.client.chat.completions.create = AsyncMock(return_value=SimpleNamespace(choices=[]))

    with pytest.raises(ServiceFailure):
        await llm.assess_scenario("escenario")


@pytest.mark.asyncio
async def test_api_error_is_wrapped(llm):
    llm.client.chat.completions.create = AsyncMock(side_effect=OpenAIError("Connection error."))

    with pytest.raises(ServiceFailure) as exc:
        await llm.assess_scenario("escenario")
    assert "Connection error." in exc.value.reason


def test_client_requires_api_key(missing_config):
    with pytest.raises(ConfigurationMissing):
        GeminiLLMClient(missing_config)


def test_client_does_not_retry(config):
    assert GeminiLLMClient(config).client.max_retries == 0


def test_get_llm_client_is_shared_per_config(config):
    assert get_llm_client(config) is get_llm_client(config)
