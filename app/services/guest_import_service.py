"""
CSV guest import.

Rows are parsed and validated up front; the database only sees a single bulk
insert once every row has passed. A bad row therefore leaves the guest list
untouched.
"""

import csv
import io
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from ..models.guest import Guest
from ..schemas.guest import GuestCreate
from .guest_service import GuestService

logger = logging.getLogger(__name__)


class GuestImportError(Exception):
    """Base exception for guest import errors"""

    pass


class ParseError(GuestImportError):
    """Upload is not readable as CSV"""

    pass


class ValidationError(GuestImportError):
    """A row does not describe a valid guest"""

    def __init__(
        self,
        message: str,
        row: Optional[Mapping[str, Any]] = None,
        row_number: Optional[int] = None,
    ):
        super().__init__(message)
        self.row = dict(row) if row is not None else None
        self.row_number = row_number


# Normalized header -> guest field. Headers are compared lowercased with
# whitespace, underscores and dashes stripped, so "firstName", "First Name"
# and "first_name" all land on the same field.
HEADER_ALIASES = {
    "firstname": "first_name",
    "lastname": "last_name",
    "phone": "phone",
    "email": "email",
    "address": "address",
    "notes": "notes",
}

REQUIRED_FIELDS = ("first_name", "last_name", "phone")
OPTIONAL_FIELDS = ("email", "address", "notes")


def normalize_header(header: str) -> str:
    return re.sub(r"[\s_\-]+", "", header or "").lower()


def validate_guest_row(
    row: Mapping[str, Any], wedding_id: int, row_number: Optional[int] = None
) -> Dict[str, Any]:
    """
    Turn one raw CSV row into a guest payload ready for insertion.

    Args:
        row: header -> cell mapping, headers in any supported spelling
        wedding_id: wedding the guest is added to (never read from the row)
        row_number: 1-based data row index, used in error messages

    Raises:
        ValidationError: a required field is empty or the row breaks a guest
            constraint. The raw row travels with the exception.
    """
    values: Dict[str, str] = {}
    for header, cell in row.items():
        if header is None:
            continue
        field_name = HEADER_ALIASES.get(normalize_header(header))
        if field_name is None:
            continue
        cell = (cell or "").strip()
        # First non-empty spelling wins when a file carries both variants
        if cell and not values.get(field_name):
            values[field_name] = cell

    where = f"row {row_number}" if row_number is not None else "row"

    missing = [name for name in REQUIRED_FIELDS if not values.get(name)]
    if missing:
        raise ValidationError(
            f"Invalid guest data in {where}: missing {', '.join(missing)}",
            row=row,
            row_number=row_number,
        )

    for name in OPTIONAL_FIELDS:
        values.setdefault(name, "")

    try:
        guest = GuestCreate(**values)
    except PydanticValidationError as e:
        raise ValidationError(
            f"Invalid guest data in {where}: {e.errors()[0].get('msg', 'invalid value')}",
            row=row,
            row_number=row_number,
        )

    payload = guest.model_dump()
    payload["wedding_id"] = wedding_id
    return payload


def parse_csv(file_bytes: bytes) -> List[Dict[str, Optional[str]]]:
    """Decode an upload and read it as header + data rows"""
    try:
        text = file_bytes.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ParseError(f"File is not valid UTF-8 text: {e.reason}")

    if not text.strip():
        return []

    reader = csv.DictReader(io.StringIO(text, newline=""), strict=True)
    rows = []
    try:
        for row in reader:
            # DictReader files surplus cells under the None key
            if None in row:
                raise ParseError(
                    f"Line {reader.line_num} has more columns than the header"
                )
            rows.append(row)
    except csv.Error as e:
        raise ParseError(f"Malformed CSV near line {reader.line_num}: {e}")

    return rows


@dataclass
class ImportResult:
    imported_count: int
    created_guests: List[Guest] = field(default_factory=list)

    @property
    def message(self) -> str:
        return f"Successfully imported {self.imported_count} guests"


class GuestImportService:
    def __init__(self, db: Session):
        self.db = db
        self.guest_service = GuestService(db)

    def ingest(self, wedding_id: int, file_bytes: bytes) -> ImportResult:
        """
        Import guests from CSV bytes into a wedding.

        The caller has already checked that the wedding belongs to the user.
        """
        rows = parse_csv(file_bytes)

        validated = [
            validate_guest_row(row, wedding_id, row_number=index)
            for index, row in enumerate(rows, start=1)
        ]

        created = self.guest_service.create_many_guests(validated)
        logger.info(f"Imported {len(created)} guests into wedding {wedding_id}")

        return ImportResult(imported_count=len(created), created_guests=created)
