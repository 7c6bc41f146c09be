"""Loading cocktail record collections from JSON."""

import json
import pathlib
from collections.abc import Mapping, Sequence
from typing import Any, List, Union


def ensure_record_collection(records: Any) -> Sequence:
    """Check that ``records`` is a sequence of records and return it.

    Strings, bytes and mappings are sequences or iterables in Python but never
    a record collection, so they are rejected too.

    Raises:
        TypeError: If ``records`` is not a record collection.
    """
    if isinstance(records, (str, bytes, bytearray, Mapping)) or not isinstance(
        records, Sequence
    ):
        raise TypeError("Input must be a list of cocktails")
    return records


def parse_cocktails_json(json_data: Union[str, bytes]) -> List[Any]:
    """Parse a JSON document holding a list of cocktail records.

    Args:
        json_data: Raw JSON text.

    Returns:
        The deserialized list of cocktail records.

    Raises:
        ValueError: If the text is not valid JSON or does not hold a list.
    """
    try:
        cocktails = json.loads(json_data)
        if not isinstance(cocktails, list):
            raise ValueError("JSON data must be a list of cocktails")
    except ValueError as e:
        raise ValueError(f"Failed to parse cocktails JSON: {e}") from e
    return cocktails


def load_cocktails(path: Union[str, pathlib.Path]) -> List[Any]:
    """Read and parse a UTF-8 cocktails JSON file.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the content is not a JSON list.
    """
    text = pathlib.Path(path).read_text(encoding="utf-8")
    return parse_cocktails_json(text)
