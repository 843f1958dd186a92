# Calorie extraction from free-text nutrient values like "389 kcal".
#
# Two rules exist and they are not identical:
#   extract_calories      first numeric token ("12.5g" -> 12.5, "1,200" -> 1)
#   calories_expression   evaluated by the datastore: drop every character
#                         that is not a digit or ".", empty -> '0', cast to
#                         float ("1,200" -> 1200, "kcal" -> 0)

import re
from typing import Any, Mapping, Optional

from sqlalchemy import Float, String, cast, func, literal_column
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.expression import FunctionElement

from .models import Recipe

# The source data is inconsistent about capitalization; first non-null wins
CALORIE_KEYS = ("calories", "Calorie", "calorie")

_NUMBER_RE = re.compile(r"([0-9]+(?:\.[0-9]+)?)")


def _calorie_text(nutrients: Mapping[str, Any]) -> Any:
    for key in CALORIE_KEYS:
        value = nutrients.get(key)
        if value is not None:
            return value
    return None


def extract_calories(nutrients: Optional[Mapping[str, Any]]) -> Optional[float]:
    """Return the first number found in the calorie entry of ``nutrients``.

    Returns None when the mapping is missing, has no calorie key, holds a
    non-string value, or the text contains no digits.
    """
    try:
        raw = _calorie_text(nutrients) if nutrients else None
        if not raw or not isinstance(raw, str):
            return None
        m = _NUMBER_RE.search(raw)
        return float(m.group(1)) if m else None
    except (AttributeError, TypeError, ValueError):
        return None


def sqlite_regexp_replace(value, pattern, replacement, flags):
    """``regexp_replace(source, pattern, replacement, flags)`` for SQLite.

    Mirrors the PostgreSQL function for the subset used here: the ``g`` flag
    replaces every match, otherwise only the first one.
    """
    if value is None:
        return None
    count = 0 if flags and "g" in flags else 1
    return re.sub(pattern, replacement, str(value), count=count)


class json_text(FunctionElement):
    """Text value of ``column[key]`` with the key rendered inline.

    ``key`` is a ``literal_column`` holding a quoted constant.
    """

    type = String()
    name = "json_text"
    inherit_cache = True


@compiles(json_text)
def _json_text_default(element, compiler, **kw):
    column, key = list(element.clauses)
    return "json_extract(%s, '$.' || %s)" % (
        compiler.process(column, **kw),
        compiler.process(key, **kw),
    )


@compiles(json_text, "postgresql")
def _json_text_postgresql(element, compiler, **kw):
    column, key = list(element.clauses)
    return "(%s ->> %s)" % (
        compiler.process(column, **kw),
        compiler.process(key, **kw),
    )


def calories_expression():
    """SQL expression for the numeric calorie value of a recipe row.

    Rows without a calorie entry, or whose entry has no digits, evaluate
    to 0. Keys, pattern and fallback are inlined constants, so the expression
    carries no bind parameters of its own.
    """
    raw = func.coalesce(
        *(json_text(Recipe.nutrients, literal_column(f"'{key}'")) for key in CALORIE_KEYS)
    )
    digits = func.regexp_replace(
        raw,
        literal_column("'[^0-9.]'"),
        literal_column("''"),
        literal_column("'g'"),
    )
    return cast(
        func.coalesce(func.nullif(digits, literal_column("''")), literal_column("'0'")),
        Float,
    )
