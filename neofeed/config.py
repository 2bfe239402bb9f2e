import os

NASA_API_KEY = os.getenv("NASA_API_KEY", "DEMO_KEY")
NEO_API_BASE = os.getenv("NEO_API_BASE", "https://api.nasa.gov/neo/rest/v1")

# seconds
HTTP_TIMEOUT = float(os.getenv("NEO_HTTP_TIMEOUT", "10"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
# unset logs to stdout only
LOG_FILE = os.getenv("LOG_FILE") or None

HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8000"))
