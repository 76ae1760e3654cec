from __future__ import annotations

import json
from typing import Optional, Tuple

from .csv_export import generate_csv
from .io_utils import read_text_content, write_csv_file
from .logging_setup import get_logger
from .sample_data import sample_payload_text
from .transform import transform_data

logger = get_logger(__name__)


def count_characters(text: Optional[str]) -> str:
    return f"{len(text or '')} characters"


def transform_handler(input_text: Optional[str]) -> Tuple[str, str, str]:
    """Parse the input pane, transform it and build the CSV.

    Returns (output JSON, CSV text, status message).
    """
    if not input_text or not input_text.strip():
        return "", "", "Paste JSON input first."

    try:
        parsed = json.loads(input_text)
    except ValueError as e:
        logger.info("Rejected invalid JSON input: %s", e)
        return "", "", f"Invalid JSON input: {str(e)}"

    result = transform_data(parsed)
    output_json = json.dumps(result, indent=2, ensure_ascii=False)
    csv_text = generate_csv(result)

    logger.info("Transformed %d order(s)", len(result))
    return output_json, csv_text, f"Successfully transformed {len(result)} order(s) and generated CSV"


def load_sample_handler() -> Tuple[str, str]:
    return sample_payload_text(), "Sample data loaded!"


def clear_handler():
    return "", "", "", "", None


def upload_handler(file_obj) -> Tuple[str, str]:
    if file_obj is None:
        return "", "No file uploaded."

    try:
        text = read_text_content(file_obj)
        json.loads(text)
    except (OSError, UnicodeDecodeError) as e:
        return "", f"Error reading file: {str(e)}"
    except ValueError as e:
        return "", f"Invalid JSON input: {str(e)}"

    return text, "File loaded. Press Transform to convert it."


def download_csv_handler(csv_text: Optional[str]):
    """Write the CSV pane to a timestamped file; returns (path, status)."""
    if not csv_text:
        return None, "Nothing to download. Transform some data first."

    try:
        path = write_csv_file(csv_text)
    except OSError as e:
        logger.warning("CSV export failed: %s", e)
        return None, f"Error during export: {str(e)}"

    return path, f"CSV saved with UTF-8 encoding to {path}"
