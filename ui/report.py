"""
ui/report.py
Reporte visual del análisis y panel de error.
El contenido viene del LLM, así que todo el texto se escapa.
"""
from html import escape

from agent.models import RiskLevel, ScenarioAnalysis

# (fondo, texto, borde)
RISK_COLORS = {
    RiskLevel.LOW: ("rgba(16, 185, 129, 0.2)", "#34d399", "rgba(16, 185, 129, 0.5)"),
    RiskLevel.MEDIUM: ("rgba(234, 179, 8, 0.2)", "#facc15", "rgba(234, 179, 8, 0.5)"),
    RiskLevel.HIGH: ("rgba(249, 115, 22, 0.2)", "#fb923c", "rgba(249, 115, 22, 0.5)"),
    RiskLevel.CRITICAL: ("rgba(239, 68, 68, 0.2)", "#f87171", "rgba(239, 68, 68, 0.5)"),
}


def _item_card(title: str, body: str, css_class: str) -> str:
    return f"""
        <div class="report-item {css_class}">
            <h5>{escape(title)}</h5>
            <p>{escape(body)}</p>
        </div>
    """


def generate_html(result: ScenarioAnalysis) -> str:
    """Genera el reporte visual HTML compatible con modo oscuro."""
    background, color, border = RISK_COLORS[result.risk_level]

    threats = "".join(_item_card(t.title, t.description, "threat") for t in result.threats)
    recommendations = "".join(
        _item_card(r.title, r.action, "recommendation") for r in result.recommendations
    )

    return f"""
    <div class="report">
        <div class="report-risk" data-risk="{result.risk_level.value}"
             style="background: {background}; color: {color}; border-color: {border};">
            <div class="report-risk-head">
                <h3>🛡️ 風險等級：{result.risk_level.value}</h3>
                <span class="report-tag">AI 生成報告</span>
            </div>
            <p>{escape(result.summary)}</p>
        </div>

        <div class="report-grid">
            <div class="report-column">
                <h4>⚠️ 潛在威脅</h4>
                {threats}
            </div>
            <div class="report-column">
                <h4>✅ 防護建議</h4>
                {recommendations}
            </div>
        </div>
    </div>
    """


def generate_error_html(message: str) -> str:
    return f'<div class="error-panel">⚠️ {escape(message)}</div>'
