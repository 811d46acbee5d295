import json

import pytest
from pydantic import ValidationError

from agent.errors import ServiceFailure
from agent.models import Recommendation, RiskLevel, ScenarioAnalysis, Threat, decode_analysis


def _payload(base: dict, **overrides) -> str:
    data = dict(base)
    data.update(overrides)
    return json.dumps(data, ensure_ascii=False)


def test_decode_keeps_values_exactly(valid_payload, valid_response):
    analysis = decode_analysis(valid_payload)

    assert analysis.risk_level is RiskLevel.HIGH
    assert analysis.summary == valid_response["summary"]
    assert analysis.threats == [Threat(title="A", description="B")]
    assert analysis.recommendations == [Recommendation(title="C", action="D")]


def test_decode_preserves_service_order(valid_response):
    threats = [{"title": t, "description": t.lower()} for t in ["Z", "A", "M"]]
    analysis = decode_analysis(_payload(valid_response, threats=threats))

    assert [t.title for t in analysis.threats] == ["Z", "A", "M"]


def test_decode_does_not_strip_text(valid_response):
    analysis = decode_analysis(_payload(valid_response, summary="  espacios  "))
    assert analysis.summary == "  espacios  "


@pytest.mark.parametrize("level", ["LOW", "MEDIUM", "HIGH", "CRITICAL"])
def test_decode_accepts_every_risk_level(valid_response, level):
    analysis = decode_analysis(_payload(valid_response, riskLevel=level))
    assert analysis.risk_level.value == level


@pytest.mark.parametrize("level", ["SEVERE", "high", "", None, 3])
def test_decode_rejects_unknown_risk_level(valid_response, level):
    with pytest.raises(ServiceFailure):
        decode_analysis(_payload(valid_response, riskLevel=level))


@pytest.mark.parametrize("field", ["riskLevel", "summary", "threats", "recommendations"])
def test_decode_rejects_missing_field(valid_response, field):
    del valid_response[field]

    with pytest.raises(ServiceFailure):
        decode_analysis(json.dumps(valid_response))


def test_decode_rejects_incomplete_items(valid_response):
    with pytest.raises(ServiceFailure):
        decode_analysis(_payload(valid_response, threats=[{"title": "A"}]))
    with pytest.raises(ServiceFailure):
        decode_analysis(_payload(valid_response, recommendations=[{"title": "C", "description": "D"}]))


def test_decode_rejects_wrong_types(valid_response):
    with pytest.raises(ServiceFailure):
        decode_analysis(_payload(valid_response, summary=42))
    with pytest.raises(ServiceFailure):
        decode_analysis(_payload(valid_response, threats={"title": "A", "description": "B"}))


@pytest.mark.parametrize("payload", [None, "", "   \n"])
def test_decode_rejects_empty_payload(payload):
    with pytest.raises(ServiceFailure) as exc:
        decode_analysis(payload)
    assert exc.value.reason == "empty payload"


@pytest.mark.parametrize("payload", ["not json", '{"riskLevel": "HIGH"', "[]"])
def test_decode_rejects_invalid_json(payload):
    with pytest.raises(ServiceFailure) as exc:
        decode_analysis(payload)
    assert exc.value.reason.startswith("schema mismatch")


def test_decode_ignores_extra_keys(valid_response):
    analysis = decode_analysis(_payload(valid_response, confidence=0.9))
    assert not hasattr(analysis, "confidence")


def test_analysis_is_immutable(valid_payload):
    analysis = decode_analysis(valid_payload)
    with pytest.raises(ValidationError):
        analysis.summary = "otro"


def test_decode_rejects_python_field_name(valid_response):
    valid_response["risk_level"] = valid_response.pop("riskLevel")

    with pytest.raises(ServiceFailure):
        decode_analysis(json.dumps(valid_response, ensure_ascii=False))


def test_analysis_is_built_with_schema_names():
    analysis = ScenarioAnalysis(riskLevel=RiskLevel.LOW, summary="ok", threats=[], recommendations=[])
    assert analysis.risk_level == "LOW"

    with pytest.raises(ValidationError):
        ScenarioAnalysis(risk_level=RiskLevel.LOW, summary="ok", threats=[], recommendations=[])
