from dotenv import load_dotenv
import os
from urllib.parse import quote_plus
from pathlib import Path

# Load .env
env_path = Path(__file__).resolve().parents[1] / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)

DATABASE_URL = os.getenv("DATABASE_URL")
if DATABASE_URL:
    SQLALCHEMY_URL = DATABASE_URL
else:
    DB_HOST = os.getenv("DB_HOST", "localhost")
    DB_PORT = os.getenv("DB_PORT", "5432")
    DB_NAME = os.getenv("DB_NAME", "postgres")
    DB_USER = os.getenv("DB_USER", "postgres")
    DB_PASSWORD = os.getenv("DB_PASSWORD", "")
    DB_SSLMODE = os.getenv("DB_SSLMODE", "require")

    SQLALCHEMY_URL = (
        f"postgresql+psycopg2://{quote_plus(DB_USER)}:{quote_plus(DB_PASSWORD)}"
        f"@{DB_HOST}:{DB_PORT}/{DB_NAME}?sslmode={DB_SSLMODE}"
    )

DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "5"))
DB_MAX_OVERFLOW = int(os.getenv("DB_MAX_OVERFLOW", "10"))
DB_STATEMENT_TIMEOUT_MS = int(os.getenv("DB_STATEMENT_TIMEOUT_MS", "15000"))
DB_APPLICATION_NAME = os.getenv("DB_APPLICATION_NAME", "pool-portal")

# Hosted auth service (sign-in, sign-up, get_user_role RPC)
SUPABASE_URL = (os.getenv("SUPABASE_URL") or "").rstrip("/")
SUPABASE_ANON_KEY = os.getenv("SUPABASE_ANON_KEY", "")
AUTH_TIMEOUT_SECONDS = int(os.getenv("AUTH_TIMEOUT_SECONDS", "10"))

# S3-compatible object storage for attachments
STORAGE_ENDPOINT_URL = os.getenv("STORAGE_ENDPOINT_URL") or (
    f"{SUPABASE_URL}/storage/v1/s3" if SUPABASE_URL else None
)
STORAGE_REGION = os.getenv("STORAGE_REGION", "us-east-1")
STORAGE_ACCESS_KEY_ID = os.getenv("STORAGE_ACCESS_KEY_ID")
STORAGE_SECRET_ACCESS_KEY = os.getenv("STORAGE_SECRET_ACCESS_KEY")
STORAGE_BUCKET = os.getenv("STORAGE_BUCKET", "attachments")
STORAGE_PUBLIC_URL = (os.getenv("STORAGE_PUBLIC_URL") or (
    f"{SUPABASE_URL}/storage/v1/object/public" if SUPABASE_URL else ""
)).rstrip("/")

# Logging
DB_ERROR_LOG = os.getenv("DB_ERROR_LOG", "db_errors.log")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Dashboard behaviour
SCHEDULE_REFRESH_SECONDS = int(os.getenv("SCHEDULE_REFRESH_SECONDS", "30"))
SERVICE_HISTORY_PAGE_SIZE = int(os.getenv("SERVICE_HISTORY_PAGE_SIZE", "10"))
