from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import Depends, FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from . import config, crud, schemas
from .db import get_db, init_db, ping
from .logging_config import configure_logging
from .pagination import link_header, normalize_page_request
from .predicates import SearchFilters, build_predicates

log = structlog.get_logger("recipe_browser.app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(level=config.LOG_LEVEL, log_json=config.LOG_JSON)
    # Initialize DB once at startup
    init_db()
    ping()
    log.info("database ready")
    yield


app = FastAPI(title="Recipe Browser API", lifespan=lifespan)

# Allow CORS for API clients (adjust origins for production)
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SQLAlchemyError)
async def datastore_error(request: Request, exc: SQLAlchemyError):
    log.error("datastore failure", path=request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


@app.get("/health")
def health():
    return {"ok": True}


@app.get("/api/recipes", response_model=schemas.RecipePage)
def list_recipes(
    request: Request,
    response: Response,
    page: Optional[str] = None,
    limit: Optional[str] = None,
    db: Session = Depends(get_db),
):
    # page/limit are taken as raw strings so bad values fall back to defaults
    page_request = normalize_page_request(page, limit)
    total = crud.count_recipes(db)
    rows = crud.get_recipes(db, page_request)

    link = link_header(request.url, page_request, total)
    if link:
        response.headers["Link"] = link
    log.info(
        "listed recipes",
        page=page_request.page,
        limit=page_request.limit,
        total=total,
        returned=len(rows),
    )
    return {
        "page": page_request.page,
        "limit": page_request.limit,
        "total": total,
        "data": rows,
    }


@app.get("/api/recipes/search", response_model=schemas.RecipeSearchResult)
def search_recipes(
    title: Optional[str] = None,
    cuisine: Optional[str] = None,
    rating: Optional[str] = None,
    total_time: Optional[str] = None,
    calories: Optional[str] = None,
    db: Session = Depends(get_db),
):
    filters = SearchFilters(
        title=title,
        cuisine=cuisine,
        rating=rating,
        total_time=total_time,
        calories=calories,
    )
    predicates = build_predicates(filters)
    rows = crud.search_recipes(db, predicates)
    log.info("searched recipes", fields=predicates.fields, returned=len(rows))
    return {"data": rows}
