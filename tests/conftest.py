import polars as pl
import pytest

from whodas.scoring.scoring_schema import ANSWERED_CATEGORIES, required_items


def make_respondents(
    answers_per_item,
    include_work_items: bool = False,
    n: int = 1,
) -> pl.DataFrame:
    """
    Build a respondent table. `answers_per_item` is either a single label for all
    items or a callable item name -> label.
    """
    data = {"id": list(range(1, n + 1))}
    for item in required_items(include_work_items):
        answer = (
            answers_per_item(item) if callable(answers_per_item) else answers_per_item
        )
        data[item] = pl.Series([answer] * n, dtype=pl.String)
    return pl.DataFrame(data)


@pytest.fixture
def respondents():
    return make_respondents


@pytest.fixture
def labels():
    return [category.value for category in ANSWERED_CATEGORIES]


@pytest.fixture
def all_none():
    return make_respondents("None", include_work_items=True, n=3)


@pytest.fixture
def all_extreme():
    return make_respondents("Extreme or cannot do", include_work_items=True, n=3)
