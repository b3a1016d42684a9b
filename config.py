import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


def _get(key, default):
    # Environment variables win over env.yaml so secrets stay out of the file
    value = os.environ.get(key)
    if value is None:
        return data.get(key, default)
    return value


def _get_bool(key, default):
    value = _get(key, default)
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def _get_list(key, default):
    value = _get(key, default)
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return list(value or [])


class ApplicationConfig:
    DB_URI = _get("DB_URI", "sqlite+aiosqlite:///./zipshare.db")
    API_PREFIX = _get("API_PREFIX", "/api")
    API_PORT = int(_get("API_PORT", 8000))
    API_HOST = _get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = _get_list("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = _get_bool("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = _get("LOG_LEVEL", "INFO")

    # Peers allowed to set X-Forwarded-For; addresses or CIDR ranges, "*" trusts all
    TRUSTED_PROXIES = _get_list("TRUSTED_PROXIES", ["127.0.0.1"])

    # Admin authentication
    ADMIN_PASSWORD = _get("ADMIN_PASSWORD", "")
    EMERGENCY_BYPASS_TOKEN = _get("EMERGENCY_BYPASS_TOKEN", "")
    ALLOWED_IPS = _get_list("ALLOWED_IPS", [])
    RATE_LIMIT_MAX_ATTEMPTS = int(_get("RATE_LIMIT_MAX_ATTEMPTS", 5))
    RATE_LIMIT_WINDOW_MINUTES = int(_get("RATE_LIMIT_WINDOW_MINUTES", 15))

    # Session cookie
    SESSION_COOKIE_NAME = _get("SESSION_COOKIE_NAME", "zip_admin_session")
    SESSION_COOKIE_SECURE = _get_bool("SESSION_COOKIE_SECURE", True)
    SESSION_DURATION_DAYS = int(_get("SESSION_DURATION_DAYS", 7))
