"""Translate storage engine failures into PersistenceError."""

from contextlib import contextmanager

import structlog
from protean.exceptions import ObjectNotFoundError, ValidationError

from storefront.exceptions import PersistenceError

logger = structlog.get_logger(__name__)


@contextmanager
def storage_errors(action: str, **context):
    """Re-raise anything the storage engine throws as PersistenceError.

    Missing records, invalid data and already-translated failures pass through
    unchanged.
    """
    try:
        yield
    except (ObjectNotFoundError, ValidationError, PersistenceError):
        raise
    except Exception as exc:
        logger.error("Storage failure", action=action, error=str(exc), **context)
        raise PersistenceError(f"could not {action}: {exc}") from exc
