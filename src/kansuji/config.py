import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Base paths
PROJECT_ROOT = Path(__file__).parent.parent.parent
CACHE_DIR = Path(os.getenv("KANSUJI_CACHE_DIR", PROJECT_ROOT / "cache"))
DATA_DIR = Path(os.getenv("KANSUJI_DATA_DIR", PROJECT_ROOT / "data"))

# e-Gov API
EGOV_API_BASE_URL = "https://laws.e-gov.go.jp/api/1"
EGOV_API_V2_BASE_URL = "https://laws.e-gov.go.jp/api/2"

# User Agent
USER_AGENT = "kansuji/0.1.0"

# CSV batch check
CSV_SNIPPET_COLUMN = 5
CSV_RESULT_HEADER = "変換結果"
