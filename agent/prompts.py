"""
agent/prompts.py
Centraliza los prompts y el esquema de salida estructurada para facilitar su edición.
"""

# Prompt del sistema: persona del consultor
SYSTEM_INSTRUCTION = """You are a friendly but professional senior cybersecurity consultant.
Your goal is to help users understand the risks of using specific AI tools in their described context.
Be encouraging but realistic.
Write every natural-language field of your answer in Traditional Chinese (繁體中文)."""


def format_scenario_prompt(scenario: str) -> str:
    """Mensaje del usuario con el escenario tal cual lo escribió."""
    return f"""Analyze the cybersecurity risks for the following AI tool usage scenario: "{scenario}".
Focus on data privacy, intellectual property, and compliance (like GDPR).
Provide a structured assessment suitable for a non-technical professional."""


RISK_LEVELS = ["LOW", "MEDIUM", "HIGH", "CRITICAL"]

# Esquema JSON que el servicio debe respetar (response_format=json_schema)
RESPONSE_SCHEMA_NAME = "scenario_risk_assessment"

RESPONSE_SCHEMA = {
    "type": "object",
    "properties": {
        "riskLevel": {
            "type": "string",
            "enum": RISK_LEVELS,
            "description": "The overall risk level of the scenario.",
        },
        "summary": {
            "type": "string",
            "description": "A 2-3 sentence summary of the analysis in Traditional Chinese.",
        },
        "threats": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "title": {
                        "type": "string",
                        "description": "Title of the threat in Traditional Chinese",
                    },
                    "description": {
                        "type": "string",
                        "description": "Brief explanation in Traditional Chinese",
                    },
                },
                "required": ["title", "description"],
            },
        },
        "recommendations": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "title": {
                        "type": "string",
                        "description": "Actionable advice title in Traditional Chinese",
                    },
                    "action": {
                        "type": "string",
                        "description": "Specific steps to take in Traditional Chinese",
                    },
                },
                "required": ["title", "action"],
            },
        },
    },
    "required": ["riskLevel", "summary", "threats", "recommendations"],
}


def build_response_format() -> dict:
    return {
        "type": "json_schema",
        "json_schema": {
            "name": RESPONSE_SCHEMA_NAME,
            "schema": RESPONSE_SCHEMA,
        },
    }
