"""
agent/errors.py
Jerarquía de errores del analizador de escenarios.
"""


class AnalyzerError(Exception):
    """Error base del analizador."""


class ConfigurationMissing(AnalyzerError):
    """Falta la credencial del servicio externo (no se llega a enviar nada)."""


class ServiceFailure(AnalyzerError):
    """
    Fallo del servicio de evaluación: red, error de la API, respuesta vacía
    o JSON que no cumple el esquema. El `reason` solo va a los logs.
    """

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason
