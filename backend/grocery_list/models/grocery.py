"""Grocery list Pydantic models."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

# Column order of the serialized list
CSV_COLUMNS = ("category", "item", "quantity")


class GroceryItem(BaseModel):
    """A single normalized record parsed from a hand-written list."""

    category: str
    item: str = Field(..., min_length=1)
    quantity: int = Field(default=1, ge=1)


class ParsedGroceryList(BaseModel):
    """Ordered result of parsing one list."""

    items: list[GroceryItem] = Field(default_factory=list)
    source: Optional[str] = None  # File path the text came from, if any

    @property
    def items_count(self) -> int:
        return len(self.items)

    @property
    def category_counts(self) -> dict[str, int]:
        """Items per category, in order of first appearance."""
        counts: dict[str, int] = {}
        for item in self.items:
            counts[item.category] = counts.get(item.category, 0) + 1
        return counts

    @property
    def categories_count(self) -> int:
        return len(self.category_counts)

    def sample(self, n: int = 10) -> list[GroceryItem]:
        """First n items, for previews."""
        return self.items[:n]


class ParseListRequest(BaseModel):
    """Request body for parsing raw list text."""

    text: str = Field(..., description="Line-separated list text")


class ParseListResponse(BaseModel):
    """Parsed list plus the category breakdown."""

    items: list[GroceryItem] = Field(default_factory=list)
    items_count: int = 0
    categories_count: int = 0
    category_counts: dict[str, int] = Field(default_factory=dict)


# =============================================================================
# Form Submission Models
# =============================================================================


class FormSubmission(BaseModel):
    """One filled-in grocery form."""

    category: str = Field(..., min_length=1)
    item: str = Field(..., min_length=1)
    quantity: int = Field(default=1, ge=1)
    submitted_at: Optional[datetime] = None

    @classmethod
    def from_item(cls, item: GroceryItem) -> "FormSubmission":
        return cls(category=item.category, item=item.item, quantity=item.quantity)


class SubmissionResponse(BaseModel):
    """Response returned by the form endpoint."""

    success: bool
    message: str = ""
    submission: Optional[FormSubmission] = None


class SubmissionResult(BaseModel):
    """Outcome of replaying one item into the form."""

    index: int  # 1-based position in the replayed list
    item: GroceryItem
    success: bool
    error: Optional[str] = None


class ReplayReport(BaseModel):
    """Summary of a full replay run."""

    results: list[SubmissionResult] = Field(default_factory=list)
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None

    @property
    def submitted_count(self) -> int:
        return sum(1 for r in self.results if r.success)

    @property
    def failed_count(self) -> int:
        return sum(1 for r in self.results if not r.success)

    @property
    def total_count(self) -> int:
        return len(self.results)
