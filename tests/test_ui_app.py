"""
Escenarios de extremo a extremo del manejador de la interfaz con el servicio simulado.
"""
import asyncio
import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from openai import OpenAIError

import ui.app as app
from agent.analyzer import SERVICE_FAILURE_MESSAGE, ScenarioAnalyzer
from agent.llm_client import GeminiLLMClient
from agent.state import AnalyzerState, FailureKind
from ui.content import ANALYZE_BUTTON, ANALYZE_BUTTON_BUSY
from ui.sessions import AnalyzerSessions

SCENARIO = "我使用 ChatGPT 整理包含客戶姓名的會議記錄"
REQUEST = SimpleNamespace(session_hash="sesion-test")


def completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


@pytest.fixture
def llm(config):
    client = GeminiLLMClient(config)
    client.client = MagicMock()
    return client


@pytest.fixture
def sessions(monkeypatch, config, llm):
    registry = AnalyzerSessions(lambda: ScenarioAnalyzer(config, client=llm))
    monkeypatch.setattr(app, "sessions", registry)
    return registry


async def collect(scenario, request=REQUEST):
    return [update async for update in app.run_analysis(scenario, request)]


@pytest.mark.asyncio
async def test_successful_analysis_shows_report(sessions, llm, valid_response):
    valid_response["threats"] = [{"title": "客戶個資外洩", "description": "會議記錄可能被用於訓練"}]
    valid_response["recommendations"] = [{"title": "資料脫敏", "action": "以代號取代客戶姓名"}]
    llm.client.chat.completions.create = AsyncMock(
        return_value=completion(json.dumps(valid_response, ensure_ascii=False))
    )

    busy, final = await collect(SCENARIO)

    button, error, result = busy
    assert button["value"] == ANALYZE_BUTTON_BUSY
    assert button["interactive"] is False
    assert error["visible"] is False
    assert result["visible"] is False

    button, error, result = final
    assert button["value"] == ANALYZE_BUTTON
    assert button["interactive"] is True
    assert error["visible"] is False
    assert result["visible"] is True
    assert "風險等級：HIGH" in result["value"]
    assert result["value"].count('class="report-item threat"') == 1
    assert result["value"].count('class="report-item recommendation"') == 1
    assert "客戶個資外洩" in result["value"]
    assert "資料脫敏" in result["value"]


@pytest.mark.asyncio
async def test_network_error_shows_generic_message(sessions, llm):
    llm.client.chat.completions.create = AsyncMock(side_effect=OpenAIError("Connection error."))

    *_, final = await collect(SCENARIO)

    button, error, result = final
    assert error["visible"] is True
    assert SERVICE_FAILURE_MESSAGE in error["value"]
    assert "Connection error" not in error["value"]
    assert result["visible"] is False
    assert button["interactive"] is True
    assert not sessions.get(REQUEST.session_hash).busy


@pytest.mark.asyncio
async def test_blank_input_does_not_call_service(sessions, llm):
    llm.client.chat.completions.create = AsyncMock()

    updates = await collect("   ")

    assert len(updates) == 1
    button, _, _ = updates[0]
    assert button["interactive"] is False
    llm.client.chat.completions.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_missing_credential_shows_configuration_error(monkeypatch, missing_config):
    monkeypatch.setattr(app, "sessions", AnalyzerSessions(lambda: ScenarioAnalyzer(missing_config)))

    updates = await collect(SCENARIO)

    assert len(updates) == 1
    _, error, result = updates[0]
    assert error["visible"] is True
    assert "API Key not found" in error["value"]
    assert result["visible"] is False


@pytest.mark.asyncio
async def test_button_stays_disabled_while_busy(sessions, llm, valid_payload):
    release = asyncio.Event()

    async def slow_create(**kwargs):
        await release.wait()
        return completion(valid_payload)

    llm.client.chat.completions.create = slow_create
    analyzer = sessions.get(REQUEST.session_hash)

    pending = asyncio.create_task(analyzer.submit(SCENARIO))
    await asyncio.sleep(0)

    assert app.update_submit_button("otro texto", REQUEST)["interactive"] is False

    release.set()
    await pending
    assert app.update_submit_button("otro texto", REQUEST)["interactive"] is True
    assert app.update_submit_button("  ", REQUEST)["interactive"] is False


def test_close_session_discards_analyzer(sessions):
    sessions.get(REQUEST.session_hash)
    assert len(sessions) == 1

    app.close_session(REQUEST)

    assert len(sessions) == 0


def test_render_view_failure_hides_result():
    state = AnalyzerState.failed(FailureKind.SERVICE_FAILURE, SERVICE_FAILURE_MESSAGE)

    button, error, result = app.render_view(state, SCENARIO)

    assert error["visible"] is True
    assert result["visible"] is False
    assert button["interactive"] is True


def test_render_view_idle_hides_both_panels():
    button, error, result = app.render_view(AnalyzerState.idle(), "")

    assert error["visible"] is False
    assert result["visible"] is False
    assert button["interactive"] is False


@pytest.mark.parametrize("request_", [None, SimpleNamespace(session_hash=None)])
def test_request_without_session_is_rejected(sessions, request_):
    with pytest.raises(ValueError):
        app.update_submit_button(SCENARIO, request_)

    assert len(sessions) == 0
