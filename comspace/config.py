"""
Configuracoes do motor de temas White Label
Variaveis de ambiente com valores padrao da plataforma ComSpace
"""
import os
from dotenv import load_dotenv

# Carregar variaveis de ambiente
load_dotenv()

# =============================================================================
# ENVIRONMENT
# =============================================================================

ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
SERVICE_NAME = os.getenv("SERVICE_NAME", "comspace-theme")

# =============================================================================
# TENANT CONFIG FETCH
# =============================================================================

# Base da API que serve /white-label/config
API_URL = os.getenv("API_URL", "http://localhost:5000/api")
TENANT_ID = os.getenv("TENANT_ID", "default")
CONFIG_FETCH_TIMEOUT = int(os.getenv("CONFIG_FETCH_TIMEOUT", 10))  # segundos

# =============================================================================
# BRANDING
# =============================================================================

# Nome padrao da plataforma (substituido no titulo pelo nome do tenant)
PLATFORM_NAME = os.getenv("PLATFORM_NAME", "ComSpace")

# Fonte ja empacotada pela plataforma, nunca carregada do Google Fonts
BUNDLED_FONT = os.getenv("BUNDLED_FONT", "Inter")

SYSTEM_FONTS = [
    "system-ui",
    "sans-serif",
    "serif",
    "monospace",
    "-apple-system",
    "BlinkMacSystemFont",
]

FONT_CSS_URL = os.getenv(
    "FONT_CSS_URL",
    "https://fonts.googleapis.com/css2?family={family}:wght@300;400;500;600;700&display=swap"
)

# =============================================================================
# CSS SANITIZER
# =============================================================================

# Teto de z-index para CSS de tenant
CSS_Z_INDEX_MAX = int(os.getenv("CSS_Z_INDEX_MAX", 100))

# Numero maximo de registros de CSS suspeito mantidos em memoria
SUSPICIOUS_CSS_LOG_SIZE = int(os.getenv("SUSPICIOUS_CSS_LOG_SIZE", 1000))
