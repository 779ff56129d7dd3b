import os

# Shared defaults; environment modules override what differs.
SHEET_CSV_URL = os.getenv(
    "SHEET_CSV_URL",
    "https://docs.google.com/spreadsheets/d/e/2PACX-1vTAeRvcKVaxjf8e87icZwsr8vFIQneEAsuCcpokxciZGSshpMmU_i8NX2riKVlr3KEbH7jgt9o3P-LS"
    "/pub?gid=42211978&single=true&output=csv",
)
CSV_PROXY_URL = os.getenv("CSV_PROXY_URL", "https://api.allorigins.win/raw")
SCRIPT_URL = os.getenv(
    "SCRIPT_URL",
    "https://script.google.com/macros/s/AKfycbx1iJP10MEILibj6NCEg-hqGm9hklC6208u05_MbQuPBsDSHtqEmjCAyJRenGAcKwntrg/exec",
)

HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "20"))
REFRESH_INTERVAL_SECONDS = float(os.getenv("REFRESH_INTERVAL_SECONDS", "60"))
STANDARD_WORKING_DAYS = int(os.getenv("STANDARD_WORKING_DAYS", "20"))
DISPLAY_TIMEZONE = os.getenv("DISPLAY_TIMEZONE", "Asia/Jakarta")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
