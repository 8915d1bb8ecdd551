import logging

import polars as pl
from polars import col

from whodas.data.data_config import ScoringConfig
from whodas.scoring.scorer import recode_expr, validate_columns
from whodas.scoring.scoring_schema import required_items

logger = logging.getLogger(__name__.rsplit(".", maxsplit=1)[-1])


def count_missing_items(
    df: pl.DataFrame,
    include_work_items: bool = False,
    id_column: str = ScoringConfig.ID_COLUMN,
) -> pl.DataFrame:
    """
    Count missing or unrecognised required items per respondent.

    Returns a DataFrame with the id column (if present) and `missing_items`.
    Respondents with at least one missing item get null scores.
    """
    validate_columns(df, include_work_items)
    exprs = [col(id_column)] if id_column in df.columns else []
    exprs.append(
        pl.sum_horizontal(
            [recode_expr(item).is_null() for item in required_items(include_work_items)]
        )
        .cast(pl.UInt8)
        .alias("missing_items")
    )
    return df.select(exprs)


def check_missing_items(
    df: pl.DataFrame,
    include_work_items: bool = False,
    id_column: str = ScoringConfig.ID_COLUMN,
) -> pl.DataFrame:
    """Log respondents with incomplete answers and return them."""
    incomplete = count_missing_items(df, include_work_items, id_column).filter(
        col("missing_items") > 0
    )
    if incomplete.is_empty():
        logger.debug("All respondents answered every required item.")
        return incomplete

    logger.warning(
        f"{incomplete.height} of {df.height} respondents have missing items, "
        "their affected scores will be null."
    )
    if id_column in incomplete.columns:
        for respondent_id, n_missing in incomplete.select(
            id_column, "missing_items"
        ).iter_rows():
            logger.debug(f"Respondent {respondent_id}: {n_missing} missing items.")
    return incomplete
