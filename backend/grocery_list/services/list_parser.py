"""
Hand-written grocery list parser.

Turns a loosely structured text list like this:

    Meats -
    .Chicken Breast (2x)
    Ground Beef 3x
    .
    Pantry
    Olive Oil
    Rice (12)

into ordered records of (category, item, quantity):

    Meats    Chicken Breast  2
    Meats    Ground Beef     3
    Pantry   Olive Oil       1
    Pantry   Rice            12

Headers are recognised by a trailing dash or by a fixed set of keywords.
Quantities are the first "(N)", "(Nx)" or "Nx" token on an item line and
default to 1. Lines that cannot be used are skipped, never reported as errors.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from grocery_list.errors import ListReadError
from grocery_list.models.grocery import GroceryItem, ParsedGroceryList

logger = logging.getLogger(__name__)

# Substring matches against the lowercased line, not whole words.
# "Pantry Moths Trap" is a header.
CATEGORY_KEYWORDS = (
    "meats",
    "pantry",
    "seasonings",
    "cleaning supplies",
    "toiletries",
    "miscellaneous",
    "bagged lunch",
)

SEPARATOR_LINES = frozenset({".", " ", ""})

DEFAULT_QUANTITY = 1

_LEADING_DOTS = re.compile(r"^\.+\s*")


@dataclass(frozen=True)
class InputLine:
    """A raw source line and its 1-based position."""

    number: int
    text: str


@dataclass
class ParseState:
    """Running state of one parse call."""

    current_category: Optional[str] = None

    @property
    def in_category(self) -> bool:
        # An empty label (e.g. a "----" divider) does not open a category
        return bool(self.current_category)


# =============================================================================
# Line Classifier
# =============================================================================


class LineClassifier:
    """Decides whether a trimmed line is a category header."""

    keywords: tuple[str, ...] = CATEGORY_KEYWORDS

    def ends_with_dash(self, line: str) -> bool:
        return line.endswith("-")

    def matches_keyword(self, line: str) -> bool:
        lowered = line.lower()
        return any(keyword in lowered for keyword in self.keywords)

    def is_header(self, line: str) -> bool:
        return self.ends_with_dash(line) or self.matches_keyword(line)


def clean_category_name(line: str) -> str:
    """
    Normalize a header line into a category label.

    A header ending in dashes loses the dashes and the whitespace before
    them, repeatedly, so "Meats -" and "Produce - -" become "Meats" and
    "Produce", and "-----" becomes "". Keyword headers are only trimmed.
    """
    label = line.strip()
    while label.endswith("-"):
        label = label.rstrip("-").strip()
    return label


# =============================================================================
# Quantity Extractor / Item Normalizer
# =============================================================================


@dataclass(frozen=True)
class QuantityToken:
    """A quantity marker found in an item line."""

    start: int
    end: int
    value: int

    @property
    def quantity(self) -> int:
        # "(0)" is still removed from the name, but never yields a zero quantity
        return self.value if self.value > 0 else DEFAULT_QUANTITY


class QuantityExtractor:
    """
    Finds the first quantity token in a line.

    Two grammars are tried at every position from left to right, the
    parenthesized one first:
    - "(12)" or "(2x)"
    - "2x"
    The same match drives both the quantity and the span removed from the
    item name, so the two can never disagree.
    """

    PAREN_PATTERN = re.compile(r"\((\d+)x?\)", re.ASCII)
    BARE_PATTERN = re.compile(r"(\d+)x", re.ASCII)

    def find(self, line: str) -> Optional[QuantityToken]:
        """Return the first quantity token in the line, if any."""
        for pos in range(len(line)):
            match = self.PAREN_PATTERN.match(line, pos) or self.BARE_PATTERN.match(line, pos)
            if match:
                return QuantityToken(
                    start=match.start(),
                    end=match.end(),
                    value=int(match.group(1)),
                )
        return None

    def extract(self, line: str) -> int:
        """Quantity from the first token, or 1 when there is none."""
        token = self.find(line)
        return token.quantity if token else DEFAULT_QUANTITY

    def clean(self, line: str) -> str:
        """Item name with the first quantity token removed."""
        token = self.find(line)
        if token:
            line = line[:token.start] + line[token.end:]
        return line.strip()

    def split(self, line: str) -> tuple[str, int]:
        """Clean name and quantity from a single scan."""
        token = self.find(line)
        if token is None:
            return line.strip(), DEFAULT_QUANTITY
        name = (line[:token.start] + line[token.end:]).strip()
        return name, token.quantity


_classifier = LineClassifier()
_extractor = QuantityExtractor()


def is_category_header(line: str) -> bool:
    """Check if a line is a category header."""
    return _classifier.is_header(line)


def parse_quantity(line: str) -> int:
    """Parse the quantity from an item line (defaults to 1)."""
    return _extractor.extract(line)


def clean_item_name(line: str) -> str:
    """Remove the quantity indicator from an item line."""
    return _extractor.clean(line)


# =============================================================================
# Parse Driver
# =============================================================================


class ListParser:
    """Walks list lines in order and emits one record per usable item line."""

    def __init__(
        self,
        classifier: Optional[LineClassifier] = None,
        extractor: Optional[QuantityExtractor] = None,
    ):
        self.classifier = classifier or _classifier
        self.extractor = extractor or _extractor

    def parse_lines(self, lines: Iterable[str]) -> list[GroceryItem]:
        """Parse lines into grocery items. Never raises on content."""
        state = ParseState()
        items: list[GroceryItem] = []

        for number, raw in enumerate(lines, start=1):
            line = InputLine(number=number, text=raw.strip())
            item = self._handle_line(line, state)
            if item is not None:
                items.append(item)

        return items

    def _handle_line(self, line: InputLine, state: ParseState) -> Optional[GroceryItem]:
        text = line.text
        if text in SEPARATOR_LINES:
            return None

        if self.classifier.is_header(text):
            state.current_category = clean_category_name(text)
            logger.debug(f"Line {line.number}: category '{state.current_category}'")
            return None

        if not state.in_category:
            logger.debug(f"Line {line.number}: no category yet, dropped '{text}'")
            return None

        text = _LEADING_DOTS.sub("", text).strip()
        if not text:
            return None

        name, quantity = self.extractor.split(text)
        if not name:
            logger.debug(f"Line {line.number}: nothing left after quantity, skipped")
            return None

        return GroceryItem(category=state.current_category, item=name, quantity=quantity)


def parse_list_text(text: str) -> list[GroceryItem]:
    """Parse a full list text blob into grocery items."""
    return ListParser().parse_lines(text.split("\n"))


def read_list_file(path: str | Path) -> str:
    """Read a list file in one blocking read."""
    path = Path(path)
    try:
        return path.read_text(encoding="utf-8-sig")
    except FileNotFoundError as e:
        raise ListReadError(path, "file not found") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ListReadError(path, str(e)) from e


def parse_list_file(path: str | Path) -> ParsedGroceryList:
    """Read and parse a list file."""
    text = read_list_file(path)
    items = parse_list_text(text)
    result = ParsedGroceryList(items=items, source=str(path))
    logger.info(
        f"Parsed {result.items_count} items across "
        f"{result.categories_count} categories from {path}"
    )
    return result
