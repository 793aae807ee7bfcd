"""
CSV serialization of parsed grocery lists.

Writes the fixed three-column layout (category, item, quantity) and reads
it back with validation, for the replay step and for round-trip checks.
"""

import csv
import io
import logging
from pathlib import Path
from typing import Iterable

from pydantic import ValidationError

from grocery_list.errors import CsvFormatError, ListReadError
from grocery_list.models.grocery import CSV_COLUMNS, GroceryItem

logger = logging.getLogger(__name__)


def _write_rows(handle, items: Iterable[GroceryItem]) -> int:
    writer = csv.DictWriter(handle, fieldnames=list(CSV_COLUMNS), lineterminator="\n")
    writer.writeheader()
    count = 0
    for item in items:
        writer.writerow(item.model_dump(include=set(CSV_COLUMNS)))
        count += 1
    return count


def items_to_csv(items: Iterable[GroceryItem]) -> str:
    """Serialize items to CSV text, header included."""
    buffer = io.StringIO()
    _write_rows(buffer, items)
    return buffer.getvalue()


def write_items_csv(items: Iterable[GroceryItem], path: str | Path) -> int:
    """Write items to a CSV file. Returns the number of rows written."""
    path = Path(path)
    with path.open("w", encoding="utf-8", newline="") as handle:
        count = _write_rows(handle, items)
    logger.info(f"Wrote {count} items to {path}")
    return count


def parse_items_csv(text: str) -> list[GroceryItem]:
    """Parse CSV text produced by items_to_csv back into items."""
    reader = csv.DictReader(io.StringIO(text))
    header = [name.strip() for name in (reader.fieldnames or [])]
    missing = [column for column in CSV_COLUMNS if column not in header]
    if missing:
        raise CsvFormatError(f"missing columns: {', '.join(missing)}", row=1)
    reader.fieldnames = header

    items: list[GroceryItem] = []
    # Row 1 is the header
    for row_number, row in enumerate(reader, start=2):
        values = {column: (row.get(column) or "").strip() for column in CSV_COLUMNS}
        if not any(values.values()):
            continue

        quantity = values["quantity"]
        if not quantity.isascii() or not quantity.isdigit():
            raise CsvFormatError(f"quantity '{quantity}' is not a whole number", row=row_number)

        try:
            items.append(GroceryItem(
                category=values["category"],
                item=values["item"],
                quantity=int(quantity),
            ))
        except ValidationError as e:
            raise CsvFormatError(
                "; ".join(err["msg"] for err in e.errors()),
                row=row_number,
            ) from e

    return items


def read_items_csv(path: str | Path) -> list[GroceryItem]:
    """Read a CSV file written by write_items_csv."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8-sig")
    except FileNotFoundError as e:
        raise ListReadError(path, "file not found") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ListReadError(path, str(e)) from e

    items = parse_items_csv(text)
    logger.info(f"Read {len(items)} items from {path}")
    return items
