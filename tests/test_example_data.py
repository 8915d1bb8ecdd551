import pytest
from polars.testing import assert_frame_equal

from whodas.data.example_data import generate_example_data
from whodas.scoring.scorer import score
from whodas.scoring.scoring_schema import required_items, score_columns


def test_shape_and_columns():
    df = generate_example_data(n=7, seed=1)
    assert df.height == 7
    assert df.columns == ["id"] + required_items()
    assert df["id"].to_list() == list(range(1, 8))


def test_work_items():
    df = generate_example_data(n=3, include_work_items=True, seed=1)
    assert df.columns[1:] == required_items(include_work_items=True)


def test_reproducible_with_seed():
    assert_frame_equal(generate_example_data(5, seed=42), generate_example_data(5, seed=42))


def test_answers_are_labels(labels):
    df = generate_example_data(20, seed=3)
    values = set(df.select(required_items()).unpivot()["value"].to_list())
    assert values <= set(labels)


def test_missing_rate():
    assert generate_example_data(5, seed=0, missing_rate=1.0).select(
        required_items()
    ).null_count().sum_horizontal().item() == 5 * 32
    with pytest.raises(ValueError):
        generate_example_data(5, missing_rate=1.5)


def test_example_data_scores():
    scored = score(generate_example_data(50, include_work_items=True, seed=7), True)
    for column in score_columns(True):
        assert scored[column].null_count() == 0
        assert scored[column].is_between(0, 100).all()
