"""
ui/content.py
Contenido estático de la página. Todo son datos: el estado de cada
certificación se define a mano, no se calcula.
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

BRAND = "AI Sentinel"

# Píxeles de scroll a partir de los cuales la barra de navegación cambia de estilo
SCROLL_THRESHOLD_PX = 20


class SectionId(str, Enum):
    HERO = "hero"
    INTRO = "intro"
    ANALYZER = "analyzer"
    REGULATIONS = "regulations"
    GUIDELINES = "guidelines"


@dataclass(frozen=True)
class NavItem:
    section: SectionId
    label: str


NAV_ITEMS = [
    NavItem(SectionId.INTRO, "風險導論"),
    NavItem(SectionId.ANALYZER, "AI 風險檢測"),
    NavItem(SectionId.REGULATIONS, "關鍵法規"),
    NavItem(SectionId.GUIDELINES, "安全指南"),
]

# ============================================================
# HERO + INTRO
# ============================================================

HERO = {
    "badge": "AI Security Analysis Platform",
    "title": "AI 賦能未來",
    "highlight": "資安守護現在",
    "lead": (
        "在這個 AI 工具爆發的時代，您的數據安全嗎？<br/>"
        "我們提供專業且易懂的風險分析，協助您在享受便利的同時，建立堅固的資安防線。"
    ),
    "primary_cta": "立即檢測風險",
    "secondary_cta": "了解更多",
    "features": [("🔒", "Privacy"), ("🖥️", "Compliance"), ("🛡️", "Security")],
}


@dataclass(frozen=True)
class InfoCard:
    icon: str
    title: str
    desc: str


INTRO_TITLE = "為什麼 AI 資安不容忽視？"
INTRO_LEAD = (
    "隨著生成式 AI 的普及，企業與個人在享受效率提升的同時，也面臨著前所未有的數據洩漏風險。"
    "不當的 Prompt 輸入可能導致機密外流，而使用不合規的工具則可能觸犯國際法規。"
)

INTRO_CARDS = [
    InfoCard("🔒", "數據隱私洩漏", "將客戶個資或公司機密輸入到公開的 AI 模型中，可能導致資料被用於模型訓練而公開。"),
    InfoCard("🛡️", "惡意內容生成", "攻擊者可能利用 AI 生成釣魚郵件或惡意程式碼，降低了網路攻擊的門檻。"),
    InfoCard("📄", "合規性風險", "GDPR 與歐盟 AI 法案對數據處理有嚴格規範，違規可能面臨巨額罰款。"),
]

# ============================================================
# ANALIZADOR (textos)
# ============================================================

ANALYZER_TITLE = "AI 使用場景風險檢測"
ANALYZER_LEAD = (
    "輸入您的使用情境（例如：「我使用 ChatGPT 整理包含客戶姓名的會議記錄」），"
    "AI 顧問將即時為您分析潛在資安隱患。"
)
ANALYZER_INPUT_LABEL = "描述您的使用情境"
ANALYZER_PLACEHOLDER = "請輸入... (範例：我打算用線上 AI 修圖工具處理公司內部產品原型的照片)"
ANALYZE_BUTTON = "🚀 開始檢測"
ANALYZE_BUTTON_BUSY = "⏳ 分析中..."

# ============================================================
# NORMATIVA Y HERRAMIENTAS
# ============================================================


class CertStatus(str, Enum):
    # Disponible en la versión gratuita/general
    PASS = "pass"
    # Solo en versiones de pago/empresa
    WARN = "warn"
    FAIL = "fail"


@dataclass(frozen=True)
class Cert:
    name: str
    status: CertStatus
    label: Optional[str] = None


@dataclass(frozen=True)
class Tool:
    name: str
    color: str
    certs: List[Cert]
    risks: str
    prevention: str
    note: Optional[str] = None


@dataclass(frozen=True)
class IndustryHighlight:
    icon: str
    title: str
    desc: str
    color: str


REGULATIONS_TITLE = "關鍵法規與工具分析"
REGULATIONS_LEAD = (
    "以「一般免費使用」為基準進行分析。"
    "<span class='warn-text'>黃色標示</span>代表該合規性僅存在於付費/企業版中，個人版使用者需特別注意風險。"
)

INDUSTRIES = [
    IndustryHighlight("🩺", "醫療業", "必須選擇支援 HIPAA 的工具，如 Microsoft Copilot 或 Claude Enterprise。", "#fb7185"),
    IndustryHighlight("🪙", "金融業", "需要 SOC 2 Type 2 認證，並要求嚴格的資料加密與完整審計日誌。", "#fbbf24"),
    IndustryHighlight("🔏", "歐盟客戶", "確保工具符合 GDPR，並特別注意資料儲存地點 (Data Residency) 需在歐盟境內。", "#60a5fa"),
    IndustryHighlight("🎓", "教育機構", "需考慮 FERPA 與兒童隱私保護 (COPPA)，避免學生個資被採集用於模型訓練。", "#34d399"),
]

ENTERPRISE_ONLY = "(僅企業版)"
WORKSPACE_ONLY = "(僅工作區版)"

# Orden de certificaciones: GDPR -> HIPAA -> SOC 2 -> ISO 27001
TOOLS = [
    Tool(
        name="Microsoft Copilot",
        color="#3b82f6",
        certs=[
            Cert("GDPR", CertStatus.PASS),
            Cert("HIPAA", CertStatus.WARN, ENTERPRISE_ONLY),
            Cert("SOC 2", CertStatus.WARN, ENTERPRISE_ONLY),
            Cert("ISO 27001", CertStatus.WARN, ENTERPRISE_ONLY),
        ],
        risks="與 Microsoft 365 深度整合，若企業內部權限(ACL)設定混亂，員工可能透過 AI 搜尋到不該看到的薪資或人事檔案。",
        prevention="實施嚴格的零信任架構與 RBAC (角色存取控制)，定期審查 Sharepoint/OneDrive 權限。",
    ),
    Tool(
        name="ChatGPT",
        color="#10b981",
        certs=[
            Cert("GDPR", CertStatus.PASS),
            Cert("HIPAA", CertStatus.WARN, ENTERPRISE_ONLY),
            Cert("SOC 2", CertStatus.WARN, ENTERPRISE_ONLY),
            Cert("ISO 27001", CertStatus.WARN, ENTERPRISE_ONLY),
        ],
        risks="Free/Plus 版本預設會將對話用於模型訓練。員工若上傳程式碼或個資，可能發生類似三星的資料外洩事件。",
        prevention="企業應強制使用 Team 或 Enterprise 版，或在個人設定中關閉「訓練模型」選項。",
    ),
    Tool(
        name="Claude (Anthropic)",
        color="#f97316",
        certs=[
            Cert("GDPR", CertStatus.PASS),
            Cert("HIPAA", CertStatus.WARN, ENTERPRISE_ONLY),
            Cert("SOC 2", CertStatus.WARN, ENTERPRISE_ONLY),
            Cert("ISO 27001", CertStatus.FAIL),
        ],
        risks="擁有超長 Context Window，使用者容易一次性貼入整份機密合約或大量客戶資料，增加了單次外洩的規模風險。",
        prevention="導入 DLP (資料遺失防護) 系統，偵測並攔截包含敏感關鍵字的大量文字貼上行為。",
    ),
    Tool(
        name="Gemini",
        color="#0ea5e9",
        certs=[
            Cert("GDPR", CertStatus.PASS),
            Cert("HIPAA", CertStatus.PASS, "(企業版更嚴謹)"),
            Cert("SOC 2", CertStatus.WARN, WORKSPACE_ONLY),
            Cert("ISO 27001", CertStatus.WARN, WORKSPACE_ONLY),
        ],
        note="註：工作區版是指企業付費訂閱的 Gemini Business 或 Gemini Enterprise，或透過 Google Cloud (Vertex AI) 呼叫的 API。",
        risks="Gemini for Workspace 的擴充功能可能過度存取 Drive 或 Gmail 資料；免費版消費端資料可能被人工審查。",
        prevention="透過 Google Admin Console 限制 AI 存取範圍，並關閉不必要的第三方擴充功能 (Extensions)。",
    ),
    Tool(
        name="Notion AI",
        color="#94a3b8",
        certs=[
            Cert("GDPR", CertStatus.PASS),
            Cert("HIPAA", CertStatus.WARN, ENTERPRISE_ONLY),
            Cert("SOC 2", CertStatus.PASS, "(Type 2)"),
            Cert("ISO 27001", CertStatus.PASS),
        ],
        risks="Notion 常作為知識庫，AI 功能會自動索引所有頁面。若將敏感資料區隔不當，容易被無權限者透過問答獲取。",
        prevention="將敏感資料區隔在獨立的 Teamspace，並設定嚴格的頁面級別權限，避免全域 AI 索引。",
    ),
    Tool(
        name="豆包 (Doubao)",
        color="#ef4444",
        certs=[
            Cert("中國生成式AI備案", CertStatus.PASS),
            Cert("GDPR", CertStatus.FAIL),
            Cert("HIPAA", CertStatus.FAIL),
            Cert("SOC 2", CertStatus.FAIL),
            Cert("ISO 27001", CertStatus.FAIL),
        ],
        risks="資料儲存與審查機制符合中國法規，對於跨國企業存在資料跨境傳輸合規風險 (Data Residency)。",
        prevention="僅用於生成非敏感、非商業機密的一般性中文內容；嚴禁輸入歐美客戶個資或研發機密。",
    ),
]

# ============================================================
# GUÍA
# ============================================================


@dataclass(frozen=True)
class GuideStep:
    icon: str
    title: str
    desc: str
    color: str


@dataclass(frozen=True)
class IncidentCase:
    category: str
    meta: str
    title: str
    story: str
    lesson: str
    color: str


GUIDELINES_TITLE = "新手安全落地指南"
STEPS_TITLE = "AI 安全導入五步驟"
CASES_TITLE = "真實資安事件警示"

GUIDE_STEPS = [
    GuideStep("🔍", "1. 評估資料與法規需求",
              "確認將處理的資料類型 (PII/商業機密) 及所屬產業法規 (如醫療需 HIPAA、歐盟需 GDPR)。這決定了您能選用哪些工具。",
              "#3b82f6"),
    GuideStep("🧮", "2. 估算總擁有成本 (TCO)",
              "除軟體訂閱費外，務必納入「人工審核 (Human-in-the-loop)」的人力成本與資安維護費用。",
              "#6366f1"),
    GuideStep("⚙️", "3. 配置隱私設定 (Opt-out)",
              "在工具後台關閉「使用我的數據進行模型訓練」。企業版應強制實施此策略，確保資料不被反饋至模型。",
              "#f59e0b"),
    GuideStep("🛡️", "4. 數據脫敏處理 (Data Anonymization)",
              "在使用任何公有 AI 前，移除所有可識別個資 (姓名/證號)。使用代號替換真實名稱，這是最有效的防護。",
              "#10b981"),
    GuideStep("👥", "5. 建立監控與審核機制",
              "永遠不要直接信任 AI 產出。建立標準作業程序 (SOP)，要求所有 AI 生成內容必須經過人工複查與驗證。",
              "#f43f5e"),
]

INCIDENT_CASES = [
    IncidentCase(
        category="👁️ 社交工程詐騙",
        meta="2025/07 | 新加坡",
        title="Deepfake 變臉詐騙 50 萬鎂",
        story=(
            "駭客利用 Deepfake 技術複製 CEO 的臉部與聲音，假裝召開線上 Zoom 會議。"
            "透過權威性的語氣與緊急的社交工程話術，成功騙過財務主管，使其在會議後將近 50 萬美元匯入駭客帳戶。"
        ),
        lesson="涉及金流操作時，必須透過第二管道（如內部簽核系統或回撥電話）進行雙重驗證 (OOB)，不可僅依賴視訊指令。",
        color="#ef4444",
    ),
    IncidentCase(
        category="🔍 內部資料外洩",
        meta="企業內部疏失",
        title="ChatGPT 程式碼洩漏事件",
        story=(
            "某公司員工將內部核心程式碼上傳至 ChatGPT 公開版求助除錯。由於未關閉訓練設定，"
            "該段機密程式碼被納入模型資料庫，隨後在其他外部用戶詢問相關技術問題時，被 AI 意外洩漏出來。"
        ),
        lesson="嚴禁將 Proprietary Code 貼入公有 AI 服務。應建立內網專屬的 AI Gateway，或採購保證不訓練資料的 Enterprise 版本。",
        color="#f97316",
    ),
]

# ============================================================
# PIE DE PÁGINA
# ============================================================

FOOTER_TAGLINE = "致力於打造安全的 AI 應用環境"
FOOTER_DISCLAIMER = "免責聲明：本平台提供的風險分析僅供參考，不構成法律建議。"
FOOTER_MODEL_NOTICE = (
    "Gemini may display inaccurate info, including about people, so double-check its responses."
)
