"""
Simple (additive) WHODAS 2.0 scoring of a respondent table.

Each required item is recoded to an integer item score, item scores are summed
per domain and overall, and every sum is rescaled to 0-100 with the fixed
maxima from the scoring schema. Missing or unrecognised answers give a null
item score and every sum that includes it is null as well.
"""

import logging
import operator
from collections.abc import Mapping
from functools import reduce

import polars as pl
from polars import col

from whodas.scoring.scoring_schema import (
    ANSWERED_CATEGORIES,
    MAX_RAW_SCORES,
    RECODE_CLASSES,
    Category,
    domain_items,
    required_items,
    score_columns,
)

logger = logging.getLogger(__name__.rsplit(".", maxsplit=1)[-1])


class MissingColumnsError(KeyError):
    """Raised when required item columns are absent from the input table."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = list(missing)
        super().__init__(self.missing)

    def __str__(self) -> str:
        return "Missing required item columns: " + ", ".join(self.missing)


def validate_columns(
    df: pl.DataFrame,
    include_work_items: bool = False,
) -> None:
    missing = [
        item for item in required_items(include_work_items) if item not in df.columns
    ]
    if missing:
        raise MissingColumnsError(missing)


def recode_item(item: str, value) -> int | None:
    """Item score of a single raw answer, None if the answer is missing."""
    return RECODE_CLASSES[item].recode(Category.parse(value))


def recode_expr(item: str) -> pl.Expr:
    """
    Expression for the item scores of a column. Labels are matched
    case-insensitively; nulls and unknown labels map to null.
    """
    recode_class = RECODE_CLASSES[item]
    mapping = {
        category.value.lower(): recode_class.recode(category)
        for category in ANSWERED_CATEGORIES
    }
    return (
        col(item)
        .cast(pl.String)
        .str.strip_chars()
        .str.to_lowercase()
        .replace_strict(mapping, default=None, return_dtype=pl.Int16)
    )


def _sum_exprs(exprs: list[pl.Expr]) -> pl.Expr:
    # plain addition keeps nulls, unlike pl.sum_horizontal
    return reduce(operator.add, exprs)


def _rescale(raw: pl.Expr, name: str) -> pl.Expr:
    return (raw.cast(pl.Float64) * 100 / MAX_RAW_SCORES[name]).alias(name)


def _warn_unrecognised(
    df: pl.DataFrame,
    items: list[str],
) -> None:
    counts = df.select(
        [
            (col(item).is_not_null() & recode_expr(item).is_null()).sum().alias(item)
            for item in items
        ]
    ).row(0, named=True)
    unrecognised = {item: count for item, count in counts.items() if count}
    if unrecognised:
        formatted = ", ".join(f"{item}: {count}" for item, count in unrecognised.items())
        logger.warning(
            f"Unrecognised answers are treated as missing ({formatted})."
        )


def _answer_label(value):
    if isinstance(value, Category):
        return value.value
    return value


def to_frame(table) -> pl.DataFrame:
    """
    Respondent table as a DataFrame. Category members become their labels
    (MISSING becomes null) and the schema is inferred from all rows.
    """
    if isinstance(table, pl.DataFrame):
        object_columns = [
            name for name, dtype in table.schema.items() if dtype == pl.Object
        ]
        return table.with_columns(
            [
                pl.Series(
                    name,
                    [_answer_label(value) for value in table[name].to_list()],
                    dtype=pl.String,
                )
                for name in object_columns
            ]
        )
    if isinstance(table, Mapping):
        table = {
            name: [_answer_label(value) for value in values]
            for name, values in table.items()
        }
    else:
        table = [
            {name: _answer_label(value) for name, value in row.items()}
            for row in table
        ]
    return pl.DataFrame(table, infer_schema_length=None)


def score(
    table: pl.DataFrame,
    include_work_items: bool = False,
) -> pl.DataFrame:
    """
    Add rescaled WHODAS domain and overall scores to a respondent table.

    Parameters:
    - table: one row per respondent with the raw item columns (D1_1 ... D6_8).
      A list of per-respondent mappings or a dict of columns is converted
      first; answers may be labels or Category members.
    - include_work_items: also score the remunerated work items (Do52) and the
      36-item overall score (st_s36).

    Returns a new DataFrame with Do1, Do2, Do3, Do4, Do51, (Do52,) Do6, st_s32
    (and st_s36) appended, or overwritten if already present.

    Raises MissingColumnsError before any computation if required item columns
    are absent.
    """
    df = to_frame(table)
    validate_columns(df, include_work_items)

    domains = domain_items(include_work_items)
    logger.debug(
        f"Scoring {df.height} respondents on {sum(map(len, domains.values()))} items."
    )
    if df.height:
        _warn_unrecognised(df, [item for items in domains.values() for item in items])

    raw_sums = {
        domain: _sum_exprs([recode_expr(item) for item in items])
        for domain, items in domains.items()
    }
    raw_sums["st_s32"] = _sum_exprs(
        [expr for domain, expr in raw_sums.items() if domain != "Do52"]
    )
    if include_work_items:
        raw_sums["st_s36"] = raw_sums["st_s32"] + raw_sums["Do52"]

    df = df.with_columns([_rescale(raw, name) for name, raw in raw_sums.items()])
    logger.info(
        f"Scored {df.height} respondents "
        f"({'36' if include_work_items else '32'}-item version)."
    )
    return df


def score_respondent(
    answers: Mapping,
    include_work_items: bool = False,
) -> dict:
    """
    Score a single respondent given as a mapping of item names to answers.
    Returns only the score columns.
    """
    scores = (
        score([dict(answers)], include_work_items)
        .select(score_columns(include_work_items))
        .row(0, named=True)
    )
    formatted_score = ", ".join(f"{key}: {value}" for key, value in scores.items())
    logger.debug(f"WHODAS score = {formatted_score}.")
    return scores
