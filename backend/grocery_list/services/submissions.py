"""In-memory store for form submissions received by the form server."""

import logging
import threading
from datetime import datetime

from grocery_list.models.grocery import FormSubmission

logger = logging.getLogger(__name__)


class SubmissionStore:
    """Keeps accepted submissions in arrival order for the life of the process."""

    def __init__(self):
        self._items: list[FormSubmission] = []
        self._lock = threading.Lock()

    def add(self, submission: FormSubmission) -> FormSubmission:
        stored = submission.model_copy(update={"submitted_at": datetime.utcnow()})
        with self._lock:
            self._items.append(stored)
        logger.info(f"Received: {stored.category} - {stored.item} ({stored.quantity})")
        return stored

    def items(self) -> list[FormSubmission]:
        with self._lock:
            return list(self._items)

    def clear(self) -> int:
        with self._lock:
            removed = len(self._items)
            self._items.clear()
        return removed

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
