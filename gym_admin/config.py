# =======================================================================================
# gym_admin/config.py - Configuration Management
# =======================================================================================
import os
from dotenv import load_dotenv

load_dotenv()

def _env_float(name: str, default: float) -> float:
    """Helper to parse float environment variables, falling back on bad input."""
    v = os.getenv(name)
    try:
        return float(v) if v else default
    except ValueError:
        return default

class Config:
    # Backend
    API_BASE_URL: str = os.getenv("API_BASE_URL", "http://localhost:8080").rstrip("/")
    REQUEST_TIMEOUT: float = _env_float("REQUEST_TIMEOUT", 10.0)

    # Live access-log stream (STOMP over WebSocket)
    WS_URL: str = os.getenv("WS_URL", "ws://localhost:8080/ws/websocket")
    ACCESS_TOPIC: str = os.getenv("ACCESS_TOPIC", "/topic/access-logs")
    RECONNECT_DELAY: float = _env_float("RECONNECT_DELAY", 5.0)

    # Dashboard
    NOTIFICATION_DURATION: float = _env_float("NOTIFICATION_DURATION", 2.5)
    SUMMARY_REFRESH_INTERVAL: float = _env_float("SUMMARY_REFRESH_INTERVAL", 60.0)

    # Local API Settings
    API_DEBUG: bool = os.getenv("API_DEBUG", "false").lower() == "true"
    API_HOST: str = os.getenv("API_HOST", "127.0.0.1")
    API_PORT: int = int(os.getenv("API_PORT", "8000"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

config = Config()
