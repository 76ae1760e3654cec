"""Core logic for the TMS JSON Reformatting Tool.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- normalize pickup date-times, timeslots and COD flags
- reshape TMS delivery orders into the flattened order schema
- encode normalized orders as spreadsheet-friendly CSV
"""
from .csv_export import CSV_HEADERS, generate_csv
from .formatters import format_cod_task, format_pick_date_time, format_timeslot
from .transform import transform_data

__all__ = [
    "CSV_HEADERS",
    "format_cod_task",
    "format_pick_date_time",
    "format_timeslot",
    "generate_csv",
    "transform_data",
]
