"""
agent/models.py
Modelos de datos de la evaluación de riesgos devuelta por el servicio de IA.
La respuesta del LLM es texto no confiable: solo se acepta si valida completa.
"""
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from agent.errors import ServiceFailure


class RiskLevel(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class Threat(BaseModel):
    title: str
    description: str


class Recommendation(BaseModel):
    title: str
    action: str


class ScenarioAnalysis(BaseModel):
    """
    Resultado de un análisis. Efímero: vive en el estado de la sesión hasta
    el siguiente envío y nunca se persiste.
    """
    # Solo se acepta el nombre del esquema ("riskLevel"), nunca "risk_level"
    model_config = ConfigDict(frozen=True)

    risk_level: RiskLevel = Field(alias="riskLevel")
    summary: str
    # El orden es el que devuelve el servicio
    threats: List[Threat]
    recommendations: List[Recommendation]


def decode_analysis(payload: Optional[str]) -> ScenarioAnalysis:
    """
    Decodifica el texto devuelto por el servicio.

    Devuelve un ScenarioAnalysis completamente válido o lanza ServiceFailure;
    nunca un objeto parcial con valores por defecto.
    """
    if not payload or not payload.strip():
        raise ServiceFailure("empty payload")

    try:
        return ScenarioAnalysis.model_validate_json(payload)
    except ValidationError as e:
        raise ServiceFailure(f"schema mismatch: {e.error_count()} error(s)") from e
