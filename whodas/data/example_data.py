"""Synthetic WHODAS respondent tables for demos and tests."""

import logging

import numpy as np
import polars as pl

from whodas.data.data_config import ScoringConfig
from whodas.scoring.scoring_schema import ANSWERED_CATEGORIES, required_items

logger = logging.getLogger(__name__.rsplit(".", maxsplit=1)[-1])


def generate_example_data(
    n: int = 10,
    include_work_items: bool = False,
    seed: int | None = None,
    missing_rate: float = 0.0,
) -> pl.DataFrame:
    """
    Create a table of n respondents with uniformly drawn answers.

    Parameters:
    - n: number of respondents (ids 1..n)
    - include_work_items: add the four remunerated work items D5_8 ... D5_11
    - seed: seed for numpy's random generator, for reproducible tables
    - missing_rate: probability for each answer to be missing (null)
    """
    if not 0 <= missing_rate <= 1:
        raise ValueError("missing_rate must be between 0 and 1.")

    rng = np.random.default_rng(seed)
    labels = [category.value for category in ANSWERED_CATEGORIES]

    data = {ScoringConfig.ID_COLUMN: pl.Series(np.arange(1, n + 1), dtype=pl.UInt32)}
    for item in required_items(include_work_items):
        answers = rng.choice(labels, size=n).tolist()
        missing = rng.random(n) < missing_rate
        data[item] = pl.Series(
            [None if is_missing else a for a, is_missing in zip(answers, missing)],
            dtype=pl.String,
        )

    logger.debug(f"Generated example data for {n} respondents (seed={seed}).")
    return pl.DataFrame(data)
