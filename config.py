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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./business_suite.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")

    # Access and refresh credentials are signed with distinct keys
    JWT_ACCESS_SECRET = data.get("JWT_ACCESS_SECRET", "dev-access-secret-change-in-production")
    JWT_REFRESH_SECRET = data.get("JWT_REFRESH_SECRET", "dev-refresh-secret-change-in-production")
    JWT_ISSUER = data.get("JWT_ISSUER", "erp-business-suite")
    JWT_AUDIENCE = data.get("JWT_AUDIENCE", "erp-users")
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))

    FRONTEND_URL = data.get("FRONTEND_URL", "http://localhost:3000")

    # "logging" writes outgoing mail to the log, "smtp" delivers it
    EMAIL_BACKEND = data.get("EMAIL_BACKEND", "logging")
    EMAIL_FROM = data.get("EMAIL_FROM", "ERP Business Suite <no-reply@example.com>")
    SMTP_HOST = data.get("SMTP_HOST", "localhost")
    SMTP_PORT = int(data.get("SMTP_PORT", 587))
    SMTP_USER = data.get("SMTP_USER", "")
    SMTP_PASSWORD = data.get("SMTP_PASSWORD", "")
    SMTP_USE_TLS = bool(data.get("SMTP_USE_TLS", True))
    SMTP_TIMEOUT = int(data.get("SMTP_TIMEOUT", 10))
