import pytest

from progressview.models import ChallengeCatalog, UserState
from progressview.test.sample_data import CATALOG_DATA, USER_DATA


@pytest.fixture
def catalog() -> ChallengeCatalog:
    return ChallengeCatalog.model_validate(CATALOG_DATA)


@pytest.fixture
def user_state() -> UserState:
    return UserState.model_validate(USER_DATA)
