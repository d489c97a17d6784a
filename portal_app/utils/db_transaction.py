from functools import wraps
from sqlalchemy.orm import Session
import logging
from config import DB_ERROR_LOG


# Configure logging
logger = logging.getLogger(__name__)
logger.setLevel(logging.ERROR)
handler = logging.FileHandler(DB_ERROR_LOG, delay=True)
formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
handler.setFormatter(formatter)
logger.addHandler(handler)


def transactional(fn):
    """
    Rolls back the session and raises a generic RuntimeError when the wrapped
    data call fails. Guard errors (ValueError) raised before any write are
    passed through untouched so forms can show them.
    """
    @wraps(fn)
    def wrapper(db: Session, *args, **kwargs):
        try:
            return fn(db, *args, **kwargs)
        except ValueError:
            db.rollback()
            raise
        except Exception as e:
            db.rollback()
            logger.error(f"Database error in {fn.__name__}: {e}", exc_info=True)
            raise RuntimeError(f"Database operation failed in {fn.__name__}") from e

    return wrapper
