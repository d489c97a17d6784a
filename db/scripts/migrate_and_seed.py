import os, glob, hashlib, sys, argparse
from pathlib import Path
from sqlalchemy import create_engine, text


SCRIPTS_DIR = Path(__file__).resolve().parent
DB_DIR = SCRIPTS_DIR.parent
ROOT_DIR = DB_DIR.parent
APP_DIR = ROOT_DIR / "portal_app"

if str(APP_DIR) not in sys.path:
    sys.path.insert(0, str(APP_DIR))

def build_database_url() -> str:
    """
    Prefer DATABASE_URL if set (for CI). Otherwise use the URL config.py
    assembles from the DB_* variables in .env.
    """
    url = os.environ.get("DATABASE_URL")
    if url:
        return url

    from config import SQLALCHEMY_URL
    return SQLALCHEMY_URL

# --------- Engine -----------
DATABASE_URL = build_database_url()
engine = create_engine(DATABASE_URL, future=True)

# --------- Utils -----------
def sha256_file(path: str) -> str:
    with open(path, "rb") as f:
        return hashlib.sha256(f.read()).hexdigest()

def run_sql_file(conn, sql_text: str):
    """
    Whole file in one round trip; psycopg2 accepts several statements per
    execute, including $$-quoted function bodies.
    """
    if sql_text.strip():
        conn.exec_driver_sql(sql_text)

def ensure_tracking_table(conn):
    conn.execute(text(
        """
            CREATE TABLE IF NOT EXISTS schema_migrations(
                id SERIAL PRIMARY KEY,
                filename VARCHAR(255) NOT NULL,
                kind VARCHAR(20) NOT NULL,
                checksum CHAR(64) NOT NULL,
                applied_at TIMESTAMPTZ NOT NULL DEFAULT now(),
                CONSTRAINT uq_schema_migrations UNIQUE (filename, kind)
            );
        """
    ))


def apply_dir(conn, dir_path: Path, kind: str, *, reapply_on_change: bool = False):
    """
    Apply all .sql files in dir_path

    kind:
        - 'migration' -> immutable: if file changes, warn and skip (don't edit old migrations)
        - 'seed'      -> idempotent: if file changes, re-apply and update checksum
    """
    files = sorted(glob.glob(os.path.join(dir_path, "*.sql")))
    for path in files:
        fname = os.path.basename(path)
        with open(path, "r", encoding="utf-8") as f:
            sql = f.read()
        checksum = sha256_file(path)

        recorded = conn.execute(
            text("SELECT checksum FROM schema_migrations WHERE filename = :fn AND kind = :k"),
            {"fn": fname, "k": kind},
        ).fetchone()

        if recorded and recorded.checksum == checksum:
            continue

        if recorded and not reapply_on_change:
            print(f"WARNING: {kind}/{fname} has changed since last apply. "
                  f"Create a new incremented file instead of editing old ones.", file=sys.stderr)
            continue

        print(f"Applying {kind}/{fname} ...")
        run_sql_file(conn, sql)
        conn.execute(
            text(
                """
                    INSERT INTO schema_migrations (filename, kind, checksum)
                    VALUES (:fn, :k, :cs)
                    ON CONFLICT (filename, kind)
                    DO UPDATE SET checksum = EXCLUDED.checksum, applied_at = now()
                """
            ), {"fn": fname, "k": kind, "cs": checksum},
        )
        print(f"Applied {kind}/{fname}")

def rebuild_schema():
    """
    Dev helper: drop and recreate the public schema. The hosted database
    itself cannot be dropped, so everything the migrations own lives there.
    """
    with engine.connect() as conn:
        conn = conn.execution_options(isolation_level="AUTOCOMMIT")
        print("Dropping schema public ...")
        conn.exec_driver_sql("DROP SCHEMA IF EXISTS public CASCADE;")
        print("Creating schema public ...")
        conn.exec_driver_sql("CREATE SCHEMA public;")
        conn.exec_driver_sql("GRANT ALL ON SCHEMA public TO public;")
    print("Rebuild done.")

def main():
    parser = argparse.ArgumentParser(description="Apply migrations and seeds.")
    parser.add_argument("--rebuild", action="store_true", help="(Dev) Drop & recreate the public schema before applying files.")

    args = parser.parse_args()

    if args.rebuild:
        rebuild_schema()

    with engine.begin() as conn:
        ensure_tracking_table(conn)

        apply_dir(conn, DB_DIR / "migrations", "migration", reapply_on_change=False)

        apply_dir(conn, DB_DIR / "seed", "seed", reapply_on_change=True)

if __name__ == "__main__":
    main()
