# progressview/helpers/__init__.py

"""ProgressView Helper Utilities Package.

Exports commonly used helper functions and classes for:
- Logging setup (_logger.py)
- Rich console setup (_rich.py)
- Text decoration for tree messages (_styles.py)
- Number and percentage formatting (_format.py)
- Timestamp handling (_date.py)
- JSON handling (_json.py)
"""

from ._date import (
    convert_timestamp_to_utc,
    convert_unix_ms_to_utc,
    format_local_datetime,
    get_local_timezone,
)
from ._format import (
    INFINITY_TEXT,
    NAN_TEXT,
    format_fixed,
    format_number,
    format_percentage,
    percentage,
)
from ._json import load_json, load_pydantic_model, save_json
from ._logger import get_logger, log, setup_logging
from ._rich import console, print
from ._styles import PLAIN, PlainStyler, RichStyler, Styler

__all__ = [
    # Logging
    "log",
    "get_logger",
    "setup_logging",
    # Rich Console / Print
    "console",
    "print",
    # Styling
    "Styler",
    "PlainStyler",
    "RichStyler",
    "PLAIN",
    # Formatting
    "format_number",
    "format_fixed",
    "format_percentage",
    "percentage",
    "NAN_TEXT",
    "INFINITY_TEXT",
    # Dates
    "convert_timestamp_to_utc",
    "convert_unix_ms_to_utc",
    "format_local_datetime",
    "get_local_timezone",
    # JSON
    "save_json",
    "load_json",
    "load_pydantic_model",
]
