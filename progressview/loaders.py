# progressview/loaders.py

# SECTION: MODULE DOCSTRING
"""Loads user state and the challenge catalog from JSON files."""

# SECTION: IMPORTS
from pathlib import Path
from typing import Type, TypeVar

from pydantic import BaseModel

from progressview.exception import DataLoadError
from progressview.helpers._json import load_pydantic_model
from progressview.helpers._logger import log
from progressview.models.challenge import ChallengeCatalog
from progressview.models.user import UserState

T = TypeVar("T", bound=BaseModel)


def _load(model_class: Type[T], path: Path | str) -> T:
    model = load_pydantic_model(model_class, path)
    if model is None:
        # load_pydantic_model already logged the reason
        raise DataLoadError("Could not load data file", path=path, model_name=model_class.__name__)
    return model


# FUNC: load_user_state
def load_user_state(path: Path | str) -> UserState:
    user_state = _load(UserState, path)
    log.info(f"Loaded user {user_state.display_name} with {len(user_state.challenges)} completion records.")
    return user_state


# FUNC: load_catalog
def load_catalog(path: Path | str) -> ChallengeCatalog:
    catalog = _load(ChallengeCatalog, path)
    log.info(f"Loaded {len(catalog)} challenges ({len(catalog.enabled())} enabled).")
    return catalog


__all__ = ["load_user_state", "load_catalog"]
