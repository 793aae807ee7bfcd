"""
Grocery list parsing endpoints.

Parses hand-written list text into (category, item, quantity) records.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from grocery_list.models.grocery import (
    ParsedGroceryList,
    ParseListRequest,
    ParseListResponse,
)
from grocery_list.services.csv_export import items_to_csv
from grocery_list.services.list_parser import parse_list_text

router = APIRouter(prefix="/api/lists", tags=["lists"])


@router.post("/parse", response_model=ParseListResponse)
async def parse_list(body: ParseListRequest) -> ParseListResponse:
    """Parse list text.

    An empty result is not an error; items before the first category
    header are dropped.
    """
    parsed = ParsedGroceryList(items=parse_list_text(body.text))
    return ParseListResponse(
        items=parsed.items,
        items_count=parsed.items_count,
        categories_count=parsed.categories_count,
        category_counts=parsed.category_counts,
    )


@router.post("/csv", response_class=PlainTextResponse)
async def parse_list_csv(body: ParseListRequest) -> PlainTextResponse:
    """Parse list text and return it as CSV."""
    items = parse_list_text(body.text)
    return PlainTextResponse(items_to_csv(items), media_type="text/csv")
