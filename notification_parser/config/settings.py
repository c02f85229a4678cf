"""Global settings and configuration."""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Directories
DATA_DIR = PROJECT_ROOT / "data"
KEYWORD_TABLES_DIR = DATA_DIR / "keyword_tables"
OUTPUT_DIR = Path(os.getenv("OUTPUT_DIR", str(PROJECT_ROOT / "output")))
LOGS_DIR = Path(os.getenv("LOGS_DIR", str(PROJECT_ROOT / "logs")))

# Keyword table bundled with the parser (IncomeKeywords / ExpenseKeywords)
DEFAULT_KEYWORDS_FILE = Path(
    os.getenv("KEYWORDS_FILE", str(KEYWORD_TABLES_DIR / "notification_patterns.yaml"))
)

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = LOGS_DIR / "parser.log"

# Currency settings
DEFAULT_CURRENCY = os.getenv("DEFAULT_CURRENCY", "VND")
CURRENCY_SYMBOLS = {
    "VND": "₫",
    "IDR": "Rp",
    "USD": "$"
}

# Batch settings
DEFAULT_SOURCE = os.getenv("DEFAULT_SOURCE", "Unknown")
