"""
config/gemini_config.py
Configuración del cliente de Gemini (endpoint compatible con OpenAI).
Las variables se leen del entorno o de un fichero .env.
"""
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from agent.errors import ConfigurationMissing

load_dotenv()

# ============================================================
# VALORES POR DEFECTO
# ============================================================

GEMINI_API_BASE_URL = os.getenv(
    "GEMINI_API_BASE_URL",
    "https://generativelanguage.googleapis.com/v1beta/openai/",
)
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

SERVER_NAME = os.getenv("SERVER_NAME", "0.0.0.0")
SERVER_PORT = int(os.getenv("SERVER_PORT", "7860"))


@dataclass(frozen=True)
class AnalyzerConfig:
    """Configuración explícita que recibe el analizador al construirse."""
    api_key: str
    model: str = GEMINI_MODEL
    base_url: str = GEMINI_API_BASE_URL

    @classmethod
    def from_env(cls) -> "AnalyzerConfig":
        # API_KEY es el nombre que usaba la versión web
        api_key = os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY") or ""
        return cls(
            api_key=api_key.strip(),
            model=os.getenv("GEMINI_MODEL", GEMINI_MODEL),
            base_url=os.getenv("GEMINI_API_BASE_URL", GEMINI_API_BASE_URL),
        )

    def __repr__(self) -> str:
        masked = "***" if self.api_key else "<missing>"
        return f"AnalyzerConfig(api_key={masked}, model={self.model!r}, base_url={self.base_url!r})"


def validate_config(config: AnalyzerConfig) -> None:
    """Lanza ConfigurationMissing si falta la API key."""
    if not config.api_key:
        raise ConfigurationMissing(
            "GEMINI_API_KEY no está definida. Añádela al entorno o al fichero .env"
        )
