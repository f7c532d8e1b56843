"""Error handling helpers for Northwind data lookups."""
from typing import Any, Dict, Optional
import logging

import httpx

from northwind.database.table_store import RecordNotFoundError

logger = logging.getLogger(__name__)


class ErrorHandler:
    """Turns lookup faults into a payload a page can render instead of crashing."""

    def handle_exception(self, exc: Exception, context: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        if isinstance(exc, RecordNotFoundError):
            logger.info("Record not found: %s", exc)
            return {
                "message": "We couldn't find that record.",
                "fallback": True,
                "not_found": True,
                "metadata": {"error": str(exc), "table": exc.table_name, "context": context or {}},
            }

        if isinstance(exc, httpx.HTTPStatusError) and exc.response.status_code == 404:
            logger.info("Remote record not found: %s", exc.request.url)
            return {
                "message": "We couldn't find that record.",
                "fallback": True,
                "not_found": True,
                "metadata": {"error": str(exc), "context": context or {}},
            }

        logger.error("Unhandled exception in Northwind data lookup: %s", exc, exc_info=True)
        return {
            "message": "The Northwind data source is unavailable right now. Please try again later.",
            "fallback": True,
            "not_found": False,
            "metadata": {"error": str(exc), "context": context or {}},
        }
