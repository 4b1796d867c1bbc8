# main.py
from fastapi import FastAPI, Query, Path, Body, Depends, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from typing import Optional, List, Dict, Any
import logging

from config import get_settings
from errors import ValidationError, ValueTypeError, register_exception_handlers
from filters import apply_filters, parse_filter_params
from models import AnalyzedString, analyze_string
from nl_query import filter_by_natural_language
from store import StringStore

# --- Config ---
settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="[%(asctime)s] %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="String Analyzer Service", version="1.0.0")

if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

register_exception_handlers(app)


def init_store():
    app.state.store = StringStore()


@app.on_event("startup")
def on_startup():
    init_store()
    logger.info("String Analyzer Service started (env=%s)", settings.app_env)


def get_store(request: Request) -> StringStore:
    return request.app.state.store


# --- Response schemas ---
class StringListResponse(BaseModel):
    data: List[AnalyzedString]
    count: int
    filters_applied: Dict[str, Any]


class InterpretedQuery(BaseModel):
    original: str
    parsed_filters: Dict[str, Any]


class NaturalLanguageResponse(BaseModel):
    data: List[AnalyzedString]
    count: int
    interpreted_query: InterpretedQuery


# --- Endpoints ---

@app.get("/")
def root():
    return {
        "message": "String Analyzer Service",
        "version": "1.0.0",
        "endpoints": {
            "POST /strings": "Analyze and store a string",
            "GET /strings": "List strings with optional filters",
            "GET /strings/filter-by-natural-language": "Filter using a natural language query",
            "GET /strings/{string_value}": "Get a stored string",
            "DELETE /strings/{string_value}": "Delete a stored string",
        },
    }


@app.get("/health")
def health_check():
    return {"status": "healthy"}


@app.post("/strings", response_model=AnalyzedString, status_code=status.HTTP_201_CREATED)
def create_string(payload: Any = Body(None), store: StringStore = Depends(get_store)):
    if not isinstance(payload, dict) or "value" not in payload:
        raise ValidationError('Invalid request body or missing "value" field')
    value = payload["value"]
    if not isinstance(value, str):
        raise ValueTypeError('"value" must be a string')
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        # lone surrogates cannot be echoed back as UTF-8 JSON
        raise ValueTypeError('"value" must be valid Unicode text')

    return store.insert(analyze_string(value))


@app.get("/strings", response_model=StringListResponse)
def list_strings(
    is_palindrome: Optional[str] = Query(None),
    min_length: Optional[str] = Query(None),
    max_length: Optional[str] = Query(None),
    word_count: Optional[str] = Query(None),
    contains_character: Optional[str] = Query(None),
    store: StringStore = Depends(get_store),
):
    filters = parse_filter_params(
        is_palindrome=is_palindrome,
        min_length=min_length,
        max_length=max_length,
        word_count=word_count,
        contains_character=contains_character,
    )
    filtered, applied = apply_filters(store.list_all(), filters)
    return {"data": filtered, "count": len(filtered), "filters_applied": applied}


@app.get("/strings/filter-by-natural-language", response_model=NaturalLanguageResponse)
def filter_by_nl(query: Optional[str] = Query(None), store: StringStore = Depends(get_store)):
    filtered, interpreted = filter_by_natural_language(store.list_all(), query)
    return {"data": filtered, "count": len(filtered), "interpreted_query": interpreted}


@app.get("/strings/{string_value}", response_model=AnalyzedString)
def get_string(
    string_value: str = Path(..., description="URL-encoded string value to look up"),
    store: StringStore = Depends(get_store),
):
    return store.find_by_value(string_value)


@app.delete("/strings/{string_value}", status_code=status.HTTP_204_NO_CONTENT)
def delete_string(string_value: str = Path(...), store: StringStore = Depends(get_store)):
    store.delete_by_value(string_value)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=settings.host, port=settings.port)
