from contextlib import contextmanager
from db.base import get_session_factory
# Every mapped module, so string relationships resolve before the first query
from models import (  # noqa: F401
    users_models, catalog_models, scheduling_models, pool_models,
    billing_models, quote_models, contact_models,
)


@contextmanager
def get_session():
    """
    One short-lived session per screen action. Service functions commit their
    own writes; anything left uncommitted is rolled back on exit.
    """
    SessionLocal = get_session_factory()
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
