from sqlalchemy import func, select
from sqlalchemy.orm import Session

from . import config, models
from .pagination import PageRequest
from .predicates import PredicateSet

# rating desc with unrated recipes last, id breaks ties
RECIPE_ORDER = (models.Recipe.rating.desc().nulls_last(), models.Recipe.id.asc())


def count_recipes(db: Session) -> int:
    return db.scalar(select(func.count()).select_from(models.Recipe)) or 0


def get_recipes(db: Session, page_request: PageRequest):
    stmt = (
        select(models.Recipe)
        .order_by(*RECIPE_ORDER)
        .limit(page_request.limit)
        .offset(page_request.offset)
    )
    return db.scalars(stmt).all()


def search_recipes(db: Session, predicates: PredicateSet, limit: int = config.SEARCH_LIMIT):
    stmt = (
        select(models.Recipe)
        .where(predicates.where())
        .order_by(*RECIPE_ORDER)
        .limit(limit)
    )
    return db.scalars(stmt).all()
