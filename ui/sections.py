"""
ui/sections.py
Genera el HTML de las secciones estáticas de la página.
"""
from datetime import date
from typing import Optional

from ui.content import (
    BRAND,
    CASES_TITLE,
    FOOTER_DISCLAIMER,
    FOOTER_MODEL_NOTICE,
    FOOTER_TAGLINE,
    GUIDE_STEPS,
    GUIDELINES_TITLE,
    HERO,
    INCIDENT_CASES,
    INDUSTRIES,
    INTRO_CARDS,
    INTRO_LEAD,
    INTRO_TITLE,
    NAV_ITEMS,
    REGULATIONS_LEAD,
    REGULATIONS_TITLE,
    STEPS_TITLE,
    TOOLS,
    Cert,
    CertStatus,
    SectionId,
    Tool,
)

# Estilo e icono de cada insignia de certificación
CERT_BADGES = {
    CertStatus.PASS: ("cert-pass", "✓"),
    # Existe, pero solo en la versión de pago/empresa
    CertStatus.WARN: ("cert-warn", "👑"),
    CertStatus.FAIL: ("cert-fail", "✕"),
}


def render_navbar() -> str:
    links = "".join(
        f'<a class="nav-link" href="#{item.section.value}">{item.label}</a>'
        for item in NAV_ITEMS
    )
    return f"""
    <nav id="site-nav" class="site-nav">
        <a class="nav-brand" href="#{SectionId.HERO.value}">🛡️ <span>{BRAND}</span></a>
        <div class="nav-links">{links}</div>
        <button class="nav-toggle" type="button" aria-label="Menu">☰</button>
    </nav>
    """


def render_hero() -> str:
    features = "".join(
        f'<div class="hero-feature"><div class="hero-feature-icon">{icon}</div><span>{label}</span></div>'
        for icon, label in HERO["features"]
    )
    return f"""
    <section id="{SectionId.HERO.value}" class="hero">
        <div class="hero-badge"><span class="pulse-dot"></span>{HERO["badge"]}</div>
        <h1 class="hero-title">{HERO["title"]}<br/><span class="hero-highlight">{HERO["highlight"]}</span></h1>
        <p class="hero-lead">{HERO["lead"]}</p>
        <div class="hero-actions">
            <a class="btn-primary" href="#{SectionId.ANALYZER.value}">🧠 {HERO["primary_cta"]}</a>
            <a class="btn-secondary" href="#{SectionId.INTRO.value}">🔒 {HERO["secondary_cta"]}</a>
        </div>
        <div class="hero-features">{features}</div>
        <a class="scroll-hint" href="#{SectionId.INTRO.value}">⌄</a>
    </section>
    """


def render_intro() -> str:
    cards = "".join(
        f"""
        <div class="card">
            <div class="card-icon">{card.icon}</div>
            <h3>{card.title}</h3>
            <p>{card.desc}</p>
        </div>
        """
        for card in INTRO_CARDS
    )
    return f"""
    <section id="{SectionId.INTRO.value}" class="section section-alt">
        <div class="section-head">
            <h2>{INTRO_TITLE}</h2>
            <p>{INTRO_LEAD}</p>
        </div>
        <div class="grid grid-3">{cards}</div>
    </section>
    """


def render_cert(cert: Cert) -> str:
    css_class, icon = CERT_BADGES[cert.status]
    label = f'<span class="cert-label">{cert.label}</span>' if cert.label else ""
    return f'<span class="cert {css_class}">{icon} {cert.name}{label}</span>'


def render_tool(tool: Tool) -> str:
    certs = "".join(render_cert(c) for c in tool.certs)
    note = f'<p class="tool-note">{tool.note}</p>' if tool.note else ""
    return f"""
    <div class="tool-card" style="border-top-color: {tool.color};">
        <h3>{tool.name}</h3>
        <div class="cert-list">{certs}</div>
        {note}
        <div class="tool-box">
            <div class="tool-box-title risk">⚠️ 主要安全風險</div>
            <p>{tool.risks}</p>
        </div>
        <div class="tool-box">
            <div class="tool-box-title prevention">🛡️ 預防措施</div>
            <p>{tool.prevention}</p>
        </div>
    </div>
    """


def render_regulations() -> str:
    industries = "".join(
        f"""
        <div class="industry" style="border-color: {item.color};">
            <div class="industry-title" style="color: {item.color};">{item.icon} {item.title}</div>
            <p>{item.desc}</p>
        </div>
        """
        for item in INDUSTRIES
    )
    tools = "".join(render_tool(tool) for tool in TOOLS)
    return f"""
    <section id="{SectionId.REGULATIONS.value}" class="section">
        <div class="section-head">
            <h2>🌐 {REGULATIONS_TITLE}</h2>
            <p>{REGULATIONS_LEAD}</p>
        </div>
        <div class="grid grid-4">{industries}</div>
        <div class="grid grid-3">{tools}</div>
    </section>
    """


def render_guidelines() -> str:
    steps = "".join(
        f"""
        <div class="step">
            <div class="step-node" style="background: {step.color};">{step.icon}</div>
            <div class="step-body">
                <h4>{step.title}</h4>
                <p>{step.desc}</p>
            </div>
        </div>
        """
        for step in GUIDE_STEPS
    )
    cases = "".join(
        f"""
        <div class="case" style="border-color: {case.color};">
            <div class="case-head">
                <span style="color: {case.color};">{case.category}</span>
                <span class="case-meta">{case.meta}</span>
            </div>
            <h4>{case.title}</h4>
            <p>{case.story}</p>
            <div class="case-lesson" style="border-left-color: {case.color};">
                <strong style="color: {case.color};">💡 教訓：</strong>{case.lesson}
            </div>
        </div>
        """
        for case in INCIDENT_CASES
    )
    return f"""
    <section id="{SectionId.GUIDELINES.value}" class="section section-alt">
        <div class="section-head"><h2>📖 {GUIDELINES_TITLE}</h2></div>
        <div class="guidelines">
            <div class="steps">
                <h3>📋 {STEPS_TITLE}</h3>
                {steps}
            </div>
            <div class="cases">
                <h3>🚨 {CASES_TITLE}</h3>
                {cases}
            </div>
        </div>
    </section>
    """


def render_footer(today: Optional[date] = None) -> str:
    year = (today or date.today()).year
    return f"""
    <footer class="site-footer">
        <p>{BRAND} &copy; {year} - {FOOTER_TAGLINE}</p>
        <p class="footer-small">{FOOTER_DISCLAIMER}<br/>{FOOTER_MODEL_NOTICE}</p>
    </footer>
    """
