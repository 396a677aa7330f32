import os


class ConfigError(RuntimeError):
    pass


def get_secret(secret_name: str) -> str | None:
    secret_path = f'/run/secrets/{secret_name}'
    try:
        with open(secret_path, 'r', encoding='utf-8') as secret_file:
            return secret_file.read().strip()
    except IOError:
        return os.getenv(secret_name)


DB_PASSWORD = get_secret('db_password')
SECRET_KEY = get_secret('secret_key')

POSTGRES_DB = os.getenv("POSTGRES_DB")
POSTGRES_USER = os.getenv("POSTGRES_USER")
DB_HOST = os.getenv("DB_HOST", "localhost")
DB_PORT = os.getenv("DB_PORT", "5432")
REDIS_URL = os.getenv("REDIS_URL")

if os.getenv("DATABASE_URL"):
    DATABASE_URL = os.environ["DATABASE_URL"]
elif POSTGRES_USER and DB_PASSWORD and POSTGRES_DB:
    DATABASE_URL = f"postgresql+asyncpg://{POSTGRES_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{POSTGRES_DB}"
else:
    raise ConfigError("Can't build DATABASE_URL")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

ALGORITHM = "HS256"
JWT_ISSUER = "invoice-dashboard"
JWT_AUDIENCE = "invoice-dashboard-web"
SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "session")
SESSION_TTL_MINUTES = int(os.getenv("SESSION_TTL_MINUTES", "720"))

PAGE_CACHE_PREFIX = "page:"
PAGE_CACHE_TTL_SECONDS = int(os.getenv("PAGE_CACHE_TTL_SECONDS", "300"))

INVOICES_PATH = "/dashboard/invoices"
DASHBOARD_PATH = "/dashboard"
LOGIN_PATH = "/login"

SEED_USER_EMAIL = os.getenv("SEED_USER_EMAIL")
SEED_USER_PASSWORD = get_secret("seed_user_password") or os.getenv("SEED_USER_PASSWORD")
