"""Address list parsing with delimiter detection."""

import csv
from pathlib import Path

from errors import AddressFormatError
from models import Address


# Candidate delimiters, in tie-break order
DELIMITERS = [":", ",", ";", "\t", "|"]

ADDRESS_FIELDS = ["street", "city", "state", "country", "postal_code"]


def detect_delimiter(filepath: Path) -> str | None:
    """
    Pick the delimiter that occurs most often in the first line of a file.

    Ties go to the earliest candidate in DELIMITERS. Returns None if the file
    cannot be read or is empty.
    """
    try:
        with open(filepath, encoding="utf-8", newline="") as f:
            first_line = f.readline()
    except OSError:
        return None
    if not first_line:
        return None

    # max() keeps the first of equal counts
    return max(DELIMITERS, key=first_line.count)


def parse_address_row(row: list[str], line_number: int) -> Address:
    """Build an Address from a row holding exactly the five address fields."""
    if len(row) != len(ADDRESS_FIELDS):
        raise AddressFormatError(
            line_number, f"expected {len(ADDRESS_FIELDS)} fields, found {len(row)}"
        )
    return Address(**dict(zip(ADDRESS_FIELDS, (value.strip() for value in row))))


def read_addresses(filepath: Path) -> list[Address]:
    """
    Read a delimited address list.

    The first line is a header and is only used to detect the delimiter; each later
    non-blank line holds street, city, state, country and postal code in that order.
    """
    delimiter = detect_delimiter(filepath)
    if delimiter is None:
        return []

    addresses: list[Address] = []
    with open(filepath, encoding="utf-8", newline="") as f:
        reader = csv.reader(f, delimiter=delimiter)
        next(reader, None)
        for row in reader:
            if not any(value.strip() for value in row):
                continue
            addresses.append(parse_address_row(row, reader.line_num))
    return addresses
