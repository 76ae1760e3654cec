from __future__ import annotations

import os
import tempfile
from datetime import datetime, timezone
from typing import Optional

from .logging_setup import get_logger

logger = get_logger(__name__)

CSV_BOM = "\ufeff"


def read_text_content(file_obj) -> str:
    """Read text from an uploaded file or file path; a UTF-8 BOM is dropped."""
    if file_obj is None:
        raise ValueError("No file uploaded.")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        content = file_obj.read()
        if isinstance(content, bytes):
            content = content.decode('utf-8-sig')
        return content.lstrip(CSV_BOM)

    path = file_obj.name if hasattr(file_obj, 'name') else file_obj
    with open(path, 'r', encoding='utf-8-sig') as f:
        return f.read()


def export_dir() -> str:
    return os.getenv("TMS_REFORMATTER_EXPORT_DIR") or tempfile.gettempdir()


def csv_export_filename(now: Optional[datetime] = None) -> str:
    """``tms_data_2025-06-27T10-15-00.csv`` using the UTC time of export."""
    now = now or datetime.now(timezone.utc)
    timestamp = now.strftime("%Y-%m-%dT%H:%M:%S").replace(":", "-")
    return f"tms_data_{timestamp}.csv"


def write_csv_file(csv_text: str, file_name: Optional[str] = None) -> str:
    """Write CSV text with a leading BOM so spreadsheet tools detect UTF-8."""
    target_dir = export_dir()
    os.makedirs(target_dir, exist_ok=True)
    path = os.path.join(target_dir, file_name or csv_export_filename())

    with open(path, 'w', newline='', encoding='utf-8') as f:
        f.write(CSV_BOM + csv_text)

    logger.info("Wrote CSV export to %s", path)
    return path
