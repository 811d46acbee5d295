"""
ui/theme.py
CSS de la página y el pequeño script de navegación (scroll + menú móvil).
"""
from ui.content import SCROLL_THRESHOLD_PX

CUSTOM_CSS = """
html { scroll-behavior: smooth; }
.gradio-container { max-width: 100% !important; padding: 0 !important; background: #0f172a; color: #f8fafc; }

/* NAV */
.site-nav { position: fixed; top: 0; left: 0; right: 0; z-index: 50; display: flex; justify-content: space-between;
            align-items: center; padding: 20px 32px; transition: all 0.3s; background: transparent; }
.site-nav.scrolled { background: rgba(15, 23, 42, 0.9); backdrop-filter: blur(8px); padding: 12px 32px;
                     box-shadow: 0 4px 12px rgba(0, 0, 0, 0.3); }
.nav-brand { font-size: 20px; font-weight: bold; color: #f8fafc; text-decoration: none; }
.nav-links { display: flex; gap: 32px; }
.nav-link { color: #cbd5e1; text-decoration: none; font-size: 14px; font-weight: 500; }
.nav-link:hover { color: white; text-decoration: underline; text-decoration-color: #0ea5e9; }
.nav-toggle { display: none; background: none; border: none; color: white; font-size: 24px; cursor: pointer; }
@media (max-width: 768px) {
    .nav-toggle { display: block; }
    .nav-links { display: none; }
    .site-nav.menu-open .nav-links { display: flex; flex-direction: column; position: absolute; top: 100%; left: 0;
                                     width: 100%; background: #1e293b; padding: 16px; gap: 16px; }
}

/* HERO */
.hero { min-height: 100vh; display: flex; flex-direction: column; align-items: center; justify-content: center;
        text-align: center; padding: 96px 24px; position: relative;
        background: linear-gradient(135deg, #0f172a 0%, #1e293b 50%, #0c4a6e 100%); }
.hero-badge { display: inline-flex; align-items: center; gap: 8px; padding: 8px 16px; border-radius: 999px;
              background: rgba(30, 41, 59, 0.5); border: 1px solid #334155; color: #cbd5e1; margin-bottom: 32px; }
.pulse-dot { width: 8px; height: 8px; border-radius: 50%; background: #22c55e; }
.hero-title { font-size: 56px; font-weight: bold; line-height: 1.2; margin-bottom: 24px; color: #f8fafc; }
.hero-highlight { color: #0ea5e9; }
.hero-lead { font-size: 18px; color: #94a3b8; max-width: 680px; margin: 0 auto 40px; line-height: 1.7; }
.hero-actions { display: flex; gap: 16px; justify-content: center; flex-wrap: wrap; }
.btn-primary, .btn-secondary { padding: 16px 32px; border-radius: 12px; font-size: 18px; text-decoration: none; }
.btn-primary { background: #0284c7; color: white; font-weight: bold; box-shadow: 0 0 20px rgba(14, 165, 233, 0.3); }
.btn-secondary { background: rgba(30, 41, 59, 0.5); color: #e2e8f0; border: 1px solid #334155; }
.hero-features { margin-top: 80px; display: flex; gap: 48px; color: #64748b; }
.hero-feature { display: flex; flex-direction: column; align-items: center; gap: 8px; font-size: 12px;
                text-transform: uppercase; letter-spacing: 0.2em; }
.hero-feature-icon { padding: 12px; border-radius: 50%; background: #1e293b; border: 1px solid #334155; font-size: 22px; }
.scroll-hint { position: absolute; bottom: 32px; color: #64748b; font-size: 32px; text-decoration: none; }

/* SECCIONES */
.section { padding: 96px 24px; background: #0f172a; }
.section-alt { background: #1e293b; }
.section-head { max-width: 760px; margin: 0 auto 64px; text-align: center; }
.section-head h2 { font-size: 32px; font-weight: bold; color: white; margin-bottom: 24px; }
.section-head p { color: #94a3b8; font-size: 17px; line-height: 1.7; }
.warn-text { color: #fbbf24; font-weight: bold; margin: 0 4px; }
.grid { display: grid; gap: 24px; max-width: 1200px; margin: 0 auto 48px; }
.grid-3 { grid-template-columns: repeat(auto-fit, minmax(300px, 1fr)); }
.grid-4 { grid-template-columns: repeat(auto-fit, minmax(240px, 1fr)); }
.card { background: rgba(51, 65, 85, 0.5); padding: 32px; border-radius: 16px; border: 1px solid rgba(71, 85, 105, 0.5); }
.card h3 { font-size: 20px; color: white; margin: 16px 0 12px; }
.card p, .industry p, .tool-box p, .step-body p, .case p { color: #94a3b8; font-size: 14px; line-height: 1.6; }
.card-icon { font-size: 28px; }
.industry { padding: 16px; border-radius: 12px; border: 1px solid; }
.industry-title { font-weight: bold; margin-bottom: 8px; }

/* HERRAMIENTAS */
.tool-card { background: #1e293b; border-radius: 16px; padding: 24px; border-top: 4px solid; }
.tool-card h3 { font-size: 20px; color: white; margin-bottom: 12px; }
.cert-list { display: flex; flex-wrap: wrap; gap: 8px; margin-bottom: 16px; }
.cert { display: inline-flex; align-items: center; gap: 6px; padding: 6px 10px; font-size: 12px;
        border-radius: 6px; border: 1px solid; }
.cert-pass { background: rgba(16, 185, 129, 0.1); color: #34d399; border-color: rgba(16, 185, 129, 0.2); }
.cert-warn { background: rgba(245, 158, 11, 0.1); color: #fbbf24; border-color: rgba(245, 158, 11, 0.3); }
.cert-fail { background: rgba(51, 65, 85, 0.5); color: #64748b; border-color: #475569; }
.cert-label { opacity: 0.8; margin-left: 4px; }
.tool-note { font-size: 12px; color: #94a3b8; border-left: 2px solid #475569; padding-left: 8px; margin-bottom: 16px; }
.tool-box { background: rgba(15, 23, 42, 0.5); padding: 12px; border-radius: 8px; margin-top: 12px;
            border: 1px solid rgba(51, 65, 85, 0.5); }
.tool-box-title { font-size: 12px; font-weight: bold; text-transform: uppercase; margin-bottom: 4px; }
.tool-box-title.risk { color: #fb923c; }
.tool-box-title.prevention { color: #34d399; }

/* GUÍA */
.guidelines { display: grid; grid-template-columns: 7fr 5fr; gap: 48px; max-width: 1200px; margin: 0 auto; }
@media (max-width: 1024px) { .guidelines { grid-template-columns: 1fr; } }
.guidelines h3 { font-size: 24px; color: white; margin-bottom: 32px; }
.step { display: flex; gap: 16px; margin-bottom: 24px; }
.step-node { width: 36px; height: 36px; border-radius: 50%; display: flex; align-items: center;
             justify-content: center; flex-shrink: 0; }
.step-body, .case { flex: 1; background: rgba(15, 23, 42, 0.5); padding: 20px; border-radius: 12px;
                    border: 1px solid rgba(51, 65, 85, 0.5); }
.step-body h4, .case h4 { color: #e2e8f0; font-weight: bold; margin-bottom: 8px; }
.case { margin-bottom: 24px; }
.case-head { display: flex; justify-content: space-between; font-size: 12px; font-weight: bold; margin-bottom: 12px; }
.case-meta { color: #64748b; font-family: monospace; }
.case-lesson { background: rgba(2, 6, 23, 0.5); padding: 12px; border-radius: 8px; font-size: 12px;
               color: #cbd5e1; border-left: 2px solid; }

/* ANALIZADOR */
#analyzer { max-width: 900px; margin: 0 auto; padding: 96px 24px; }
#analyzer-head { text-align: center; }
#analyze-btn { max-width: 220px; margin-left: auto; }
.error-panel { padding: 16px; background: rgba(127, 29, 29, 0.2); border: 1px solid rgba(239, 68, 68, 0.5);
               border-radius: 12px; color: #fca5a5; }
.report-risk { padding: 24px; border-radius: 16px; border: 1px solid; margin-bottom: 32px; }
.report-risk-head { display: flex; justify-content: space-between; align-items: center; flex-wrap: wrap; gap: 16px; }
.report-risk-head h3 { font-size: 24px; font-weight: bold; margin: 0; }
.report-tag { font-size: 13px; border: 1px solid currentColor; padding: 4px 12px; border-radius: 999px; }
.report-grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(300px, 1fr)); gap: 32px; }
.report-column { background: rgba(30, 41, 59, 0.3); border-radius: 16px; padding: 24px;
                 border: 1px solid rgba(51, 65, 85, 0.5); }
.report-column h4 { font-size: 20px; color: white; margin-bottom: 24px; }
.report-item { padding: 16px; background: rgba(15, 23, 42, 0.5); border-radius: 12px; margin-bottom: 16px;
               border-left: 4px solid; }
.report-item.threat { border-left-color: rgba(249, 115, 22, 0.5); }
.report-item.recommendation { border-left-color: rgba(16, 185, 129, 0.5); }
.report-item h5 { color: #e2e8f0; font-weight: bold; margin-bottom: 4px; }
.report-item p { color: #94a3b8; font-size: 14px; }

/* PIE */
.site-footer { background: #020617; padding: 40px 24px; text-align: center; color: #64748b; border-top: 1px solid #0f172a; }
.footer-small { font-size: 14px; color: #475569; margin-top: 16px; }
"""

# Los <script> dentro de gr.HTML no se ejecutan; van en el <head>
NAV_SCRIPT = f"""
<script>
window.addEventListener("scroll", () => {{
    const nav = document.getElementById("site-nav");
    if (nav) nav.classList.toggle("scrolled", window.scrollY > {SCROLL_THRESHOLD_PX});
}});
document.addEventListener("click", (event) => {{
    const nav = document.getElementById("site-nav");
    if (!nav) return;
    if (event.target.closest(".nav-toggle")) {{
        nav.classList.toggle("menu-open");
    }} else if (event.target.closest(".nav-link")) {{
        nav.classList.remove("menu-open");
    }}
}});
</script>
"""
