import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./safemesh.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")

    # Sessions
    SESSION_TTL_SECONDS = int(data.get("SESSION_TTL_SECONDS", 900))
    SESSION_STORAGE_KEY = data.get("SESSION_STORAGE_KEY", "auth")
    SETTINGS_STORAGE_KEY = data.get("SETTINGS_STORAGE_KEY", "systemSettings")

    # Console operator account (demo values; override in env.yaml)
    ADMIN_ID = str(data.get("ADMIN_ID", "1"))
    ADMIN_NAME = data.get("ADMIN_NAME", "Admin User")
    ADMIN_EMAIL = data.get("ADMIN_EMAIL", "admin@gmail.com")
    ADMIN_PASSWORD = data.get("ADMIN_PASSWORD", "admin123")
    ADMIN_PASSWORD_HASH = data.get("ADMIN_PASSWORD_HASH", "")
    ADMIN_ROLE = data.get("ADMIN_ROLE", "Administrator")
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))

    # Demo data and dashboard constants
    SEED_DEMO_DATA = bool(data.get("SEED_DEMO_DATA", True))
    NETWORK_HEALTH_PCT = int(data.get("NETWORK_HEALTH_PCT", 87))
    QUANTUM_PAIRS = int(data.get("QUANTUM_PAIRS", 12))
    RECENT_RELAYS = int(data.get("RECENT_RELAYS", 45))
