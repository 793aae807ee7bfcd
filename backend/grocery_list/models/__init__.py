"""Pydantic models for the grocery list parser."""

from .grocery import (
    CSV_COLUMNS,
    GroceryItem,
    ParsedGroceryList,
    ParseListRequest,
    ParseListResponse,
    FormSubmission,
    SubmissionResponse,
    SubmissionResult,
    ReplayReport,
)

__all__ = [
    # Parsing
    "CSV_COLUMNS",
    "GroceryItem",
    "ParsedGroceryList",
    "ParseListRequest",
    "ParseListResponse",
    # Form replay
    "FormSubmission",
    "SubmissionResponse",
    "SubmissionResult",
    "ReplayReport",
]
