"""Service for cleanup operations."""
import logging
import threading
import time

from authoring import config
from authoring.services.wizard_service import purge_expired_sessions

logger = logging.getLogger(__name__)


def schedule_session_cleanup() -> threading.Thread:
    """Schedule periodic removal of idle wizard sessions."""
    cleanup_interval = max(config.WIZARD_SESSION_CLEANUP_INTERVAL_SECONDS, 1)

    def _worker() -> None:
        while True:
            time.sleep(cleanup_interval)
            try:
                purge_expired_sessions()
            except Exception:
                logger.exception("Wizard session cleanup failed")

    thread = threading.Thread(
        target=_worker,
        name="wizard_sessions_cleanup",
        daemon=True,
    )
    thread.start()
    return thread
