# progressview/helpers/_json.py
# ─── Helper ───────────────────────────────────────────────────────────────────
#                JSON Save/Load Utilities
# ──────────────────────────────────────────────────────────────────────────────

# SECTION: MODULE DOCSTRING
"""Utility functions for reading and writing JSON files.

Failures are logged and reported through the return value (None / False)
rather than raised. Supports validating a file straight into a Pydantic model.
"""

# SECTION: IMPORTS
import json
from pathlib import Path
from typing import Any, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ._logger import log

# SECTION: TYPE VARIABLES
T_BaseModel = TypeVar("T_BaseModel", bound=BaseModel)
JSONSerializable = dict[str, Any] | list[Any]
LoadResult = JSONSerializable | None


# FUNC: save_json
def save_json(data: JSONSerializable, filepath: str | Path, indent: int = 2, ensure_ascii: bool = False) -> bool:
    """Saves a dict or list to a JSON file, creating parent directories.

    Returns:
        True if saving was successful, False otherwise.
    """
    output_path = Path(filepath).resolve()
    log.debug(f"Attempting to save JSON data to: '{output_path}'")

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with output_path.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=indent, ensure_ascii=ensure_ascii, default=str)
        log.info(f"Successfully saved JSON data to: '{output_path}'")
        return True

    except TypeError as e:
        log.error(f"Data structure not JSON serializable for '{output_path}'. Error: {e}")
        return False
    except OSError as e:
        log.error(f"Could not write file '{output_path}'. Error: {e}")
        return False


# FUNC: load_json
def load_json(filepath: str | Path) -> LoadResult:
    """Loads data from a JSON file.

    Returns:
        The loaded dict or list, or None if the file doesn't exist, cannot be
        read, or does not hold a JSON object/array.
    """
    input_path = Path(filepath).resolve()

    if not input_path.is_file():
        log.warning(f"JSON file not found at '{input_path}'")
        return None

    log.debug(f"Attempting to load JSON from: '{input_path}'")
    try:
        with input_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        log.error(f"Failed to load or parse JSON file '{input_path}'. Error: {e}")
        return None

    if isinstance(data, (dict, list)):
        return data
    log.warning(f"Invalid data type ({type(data).__name__}) in JSON file: '{input_path}'. Expected dict or list.")
    return None


# FUNC: load_pydantic_model
def load_pydantic_model(model_class: Type[T_BaseModel], filepath: str | Path) -> T_BaseModel | None:
    """Loads a JSON file into a Pydantic model instance using model_validate.

    Args:
        model_class: The Pydantic model class (e.g., UserState, ChallengeCatalog).
        filepath: The path to the JSON file.

    Returns:
        An instance of model_class if successful, None otherwise.
    """
    data = load_json(filepath)
    if data is None:
        return None

    try:
        instance = model_class.model_validate(data)
    except ValidationError as e:
        log.error(f"Pydantic validation failed for {model_class.__name__} from '{filepath}':\n{e}")
        return None

    log.debug(f"Successfully validated JSON into Pydantic model {model_class.__name__}")
    return instance


__all__ = ["save_json", "load_json", "load_pydantic_model"]
