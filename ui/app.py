#!/usr/bin/env python3
"""
ui/app.py

Página única de AI Sentinel con Gradio:
- Secciones informativas (hero, introducción, normativa, guía)
- Analizador de escenarios con evaluación de riesgos por IA
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

import gradio as gr

# Añadir directorio raíz al path para importar módulos
sys.path.append(str(Path(__file__).parent.parent))

from agent.analyzer import SERVICE_FAILURE_MESSAGE, ScenarioAnalyzer
from agent.errors import ConfigurationMissing
from agent.state import AnalyzerState, FailureKind, Phase
from config.gemini_config import LOG_LEVEL, SERVER_NAME, SERVER_PORT, AnalyzerConfig, validate_config
from ui.content import (
    ANALYZE_BUTTON,
    ANALYZE_BUTTON_BUSY,
    ANALYZER_INPUT_LABEL,
    ANALYZER_LEAD,
    ANALYZER_PLACEHOLDER,
    ANALYZER_TITLE,
    BRAND,
    SectionId,
)
from ui.report import generate_error_html, generate_html
from ui.sections import (
    render_footer,
    render_guidelines,
    render_hero,
    render_intro,
    render_navbar,
    render_regulations,
)
from ui.sessions import AnalyzerSessions
from ui.theme import CUSTOM_CSS, NAV_SCRIPT

# Configuración de logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

# ============================================================
# CONFIGURACIÓN Y SESIONES
# ============================================================

analyzer_config = AnalyzerConfig.from_env()
try:
    validate_config(analyzer_config)
    logger.info(f"✅ Configuración cargada: {analyzer_config!r}")
except ConfigurationMissing as e:
    # La página se sirve igual; el analizador mostrará el error al usarlo
    logger.error(f"❌ {e}")

sessions = AnalyzerSessions(lambda: ScenarioAnalyzer(analyzer_config))


def _session_id(request: Optional[gr.Request]) -> str:
    # Sin session_hash no hay analizador propio: nunca se comparte uno
    session_hash = getattr(request, "session_hash", None)
    if not session_hash:
        raise ValueError("La petición no tiene session_hash")
    return session_hash


# ============================================================
# LÓGICA DE LA INTERFAZ
# ============================================================

def render_view(state: AnalyzerState, scenario: Optional[str]) -> Tuple[dict, dict, dict]:
    """
    Traduce el estado del analizador a actualizaciones de
    (botón, panel de error, panel de resultado).
    """
    has_text = bool(scenario and scenario.strip())

    if state.phase is Phase.BUSY:
        button = gr.update(value=ANALYZE_BUTTON_BUSY, interactive=False)
    else:
        button = gr.update(value=ANALYZE_BUTTON, interactive=has_text)

    if state.phase is Phase.FAILURE:
        error = gr.update(value=generate_error_html(state.error.message), visible=True)
    else:
        error = gr.update(value="", visible=False)

    if state.phase is Phase.SUCCESS:
        result = gr.update(value=generate_html(state.analysis), visible=True)
    else:
        result = gr.update(value="", visible=False)

    return button, error, result


async def run_analysis(scenario: str, request: gr.Request):
    """
    Ejecuta el análisis del escenario.
    Es un generador asíncrono: primero muestra el estado "analizando"
    y después el resultado o el error.
    """
    analyzer = sessions.get(_session_id(request))

    if not analyzer.can_submit(scenario):
        yield render_view(analyzer.state, scenario)
        return

    try:
        if analyzer.configured:
            yield render_view(AnalyzerState.busy(), scenario)
        await analyzer.submit(scenario)
    except Exception as e:
        logger.error(f"UI Error: {e}", exc_info=True)
        yield render_view(
            AnalyzerState.failed(FailureKind.SERVICE_FAILURE, SERVICE_FAILURE_MESSAGE), scenario
        )
        return

    yield render_view(analyzer.state, scenario)


def update_submit_button(scenario: str, request: gr.Request) -> dict:
    """El botón solo se activa con texto y sin petición en curso."""
    analyzer = sessions.get(_session_id(request))
    return gr.update(interactive=analyzer.can_submit(scenario))


def close_session(request: gr.Request) -> None:
    sessions.close(_session_id(request))


# ============================================================
# INTERFAZ GRADIO
# ============================================================

with gr.Blocks(
    title=BRAND,
    theme=gr.themes.Soft(primary_hue="sky", secondary_hue="slate"),
    css=CUSTOM_CSS,
    head=NAV_SCRIPT,
) as demo:

    gr.HTML(render_navbar())
    gr.HTML(render_hero())
    gr.HTML(render_intro())

    # ANALIZADOR
    with gr.Column(elem_id=SectionId.ANALYZER.value):
        gr.HTML(f"""
        <div id="analyzer-head" class="section-head">
            <h2>✨ {ANALYZER_TITLE}</h2>
            <p>{ANALYZER_LEAD}</p>
        </div>
        """)
        scenario_input = gr.Textbox(
            label=ANALYZER_INPUT_LABEL,
            placeholder=ANALYZER_PLACEHOLDER,
            lines=5,
            elem_id="scenario-input",
        )
        analyze_btn = gr.Button(
            ANALYZE_BUTTON,
            variant="primary",
            interactive=False,
            elem_id="analyze-btn",
        )
        error_panel = gr.HTML(visible=False)
        result_panel = gr.HTML(visible=False)

    gr.HTML(render_regulations())
    gr.HTML(render_guidelines())
    gr.HTML(render_footer())

    # EVENTOS
    analyze_btn.click(
        fn=run_analysis,
        inputs=[scenario_input],
        outputs=[analyze_btn, error_panel, result_panel],
        # Cada sesión limita su propia petición en curso
        concurrency_limit=None,
    )
    scenario_input.change(
        fn=update_submit_button,
        inputs=[scenario_input],
        outputs=[analyze_btn],
        queue=False,
    )
    demo.unload(close_session)

# Lanzar la app
if __name__ == "__main__":
    demo.queue().launch(
        server_name=SERVER_NAME,
        server_port=SERVER_PORT,
        share=False,
        show_error=True
    )
