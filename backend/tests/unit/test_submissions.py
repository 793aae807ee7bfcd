"""
Unit tests for the in-memory submission store.
"""

import threading

import pytest

from grocery_list.models.grocery import FormSubmission
from grocery_list.services.submissions import SubmissionStore


class TestSubmissionStore:
    """Tests for SubmissionStore."""

    @pytest.mark.unit
    def test_add_stamps_and_counts(self):
        store = SubmissionStore()
        stored = store.add(FormSubmission(category="Meats", item="Bacon", quantity=2))
        assert stored.submitted_at is not None
        assert len(store) == 1
        assert store.items() == [stored]

    @pytest.mark.unit
    def test_concurrent_adds_are_all_counted(self):
        store = SubmissionStore()

        def add_many():
            for _ in range(100):
                store.add(FormSubmission(category="Pantry", item="Rice"))
                len(store)

        threads = [threading.Thread(target=add_many) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(store) == 400
        assert store.clear() == 400
        assert len(store) == 0
