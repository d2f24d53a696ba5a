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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./signup.db")
    AUTO_CREATE_TABLES = bool(data.get("AUTO_CREATE_TABLES", True))
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ACCESS_TOKEN_SECRET = data.get("ACCESS_TOKEN_SECRET", "dev-access-secret-change-in-production")
    REFRESH_TOKEN_SECRET = data.get("REFRESH_TOKEN_SECRET", "dev-refresh-secret-change-in-production")
    JWT_ALGORITHM = data.get("JWT_ALGORITHM", "HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES = int(data.get("ACCESS_TOKEN_EXPIRE_MINUTES", 15))
    REFRESH_TOKEN_EXPIRE_DAYS = int(data.get("REFRESH_TOKEN_EXPIRE_DAYS", 7))
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))
    COOKIE_SECURE = bool(data.get("COOKIE_SECURE", False))
    COOKIE_SAMESITE = data.get("COOKIE_SAMESITE", "lax")
    COOKIE_PATH = data.get("COOKIE_PATH", "/")
    COOKIE_DOMAIN = data.get("COOKIE_DOMAIN", None)
