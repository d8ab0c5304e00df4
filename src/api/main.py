"""
FastAPI backend: phonebook REST API, info page and static front-end.
Run with uvicorn: uvicorn api.main:app --reload  (or: python -m api)
"""

import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime
from pathlib import Path

from api.config import STORE_NEO4J, Settings, load_env

load_env()

from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse, Response
from fastapi.staticfiles import StaticFiles
from neo4j import GraphDatabase
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from phonebook.application import (
    Candidate,
    MalformedIdentifier,
    PersonCreated,
    PersonNotFound,
    PersonService,
    PersonUpdated,
    Rejected,
    StructuralValidationFailure,
)
from phonebook.domain import Person
from phonebook.infrastructure import (
    SAMPLE_PEOPLE,
    InMemoryPersonRepository,
    Neo4jPersonRepository,
    PersonSchema,
    ensure_person_constraint,
)

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO,
)
logger = logging.getLogger(__name__)

UNKNOWN_ENDPOINT = "unknown endpoint"
MALFORMATTED_ID = "malformatted id"


class PersonBody(BaseModel):
    name: str | None = None
    number: str | None = None


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(content={"error": message}, status_code=status_code)


def _person_json(person: Person, status_code: int = 200) -> JSONResponse:
    return JSONResponse(content=person.to_dict(), status_code=status_code)


def get_service(request: Request) -> PersonService:
    return request.app.state.service


def build_service(settings: Settings, app: FastAPI) -> PersonService:
    """Pick the backing store from settings. Opens the Neo4j driver when needed."""
    schema = PersonSchema(
        name_min_length=settings.name_min_length,
        number_min_length=settings.number_min_length,
    )
    if settings.store == STORE_NEO4J:
        driver = GraphDatabase.driver(
            settings.neo4j_uri, auth=(settings.neo4j_user, settings.neo4j_password)
        )
        app.state.driver = driver
        ensure_person_constraint(driver)
        logger.info("Using Neo4j store at %s", settings.neo4j_uri)
        return PersonService(Neo4jPersonRepository(driver, schema=schema))
    initial = SAMPLE_PEOPLE if settings.seed else ()
    logger.info("Using in-memory store (%d seeded)", len(initial))
    return PersonService(InMemoryPersonRepository(initial, schema=schema))


router = APIRouter()


# --- REST: health ---


@router.get("/health")
def health():
    return {"status": "ok"}


# --- REST: persons ---


@router.get("/api/persons")
def list_persons(request: Request):
    service = get_service(request)
    return [p.to_dict() for p in service.list_persons()]


@router.post("/api/persons")
def create_person(request: Request, body: PersonBody | None = None):
    service = get_service(request)
    body = body or PersonBody()
    result = service.submit(Candidate(name=body.name, number=body.number))
    if isinstance(result, Rejected):
        return _error(400, result.reason)
    if isinstance(result, PersonCreated):
        return _person_json(result.person, status_code=201)
    if isinstance(result, PersonUpdated):
        return _person_json(result.person)
    return Response(status_code=404)


@router.get("/api/persons/{person_id}")
def get_person(person_id: str, request: Request):
    service = get_service(request)
    person = service.get_person(person_id)
    if person is None:
        return Response(status_code=404)
    return _person_json(person)


@router.patch("/api/persons/{person_id}")
def patch_person(person_id: str, request: Request, body: PersonBody | None = None):
    service = get_service(request)
    body = body or PersonBody()
    result = service.edit(person_id, name=body.name, number=body.number)
    if isinstance(result, PersonNotFound):
        return Response(status_code=404)
    if isinstance(result, Rejected):
        return _error(400, result.reason)
    return _person_json(result.person)


@router.delete("/api/persons/{person_id}")
def delete_person(person_id: str, request: Request):
    service = get_service(request)
    service.remove(person_id)
    return Response(status_code=204)


# --- Info page ---


@router.get("/info", response_class=HTMLResponse)
def info(request: Request):
    service = get_service(request)
    count = service.count_persons()
    now = datetime.now().astimezone().strftime("%a %b %d %Y %H:%M:%S GMT%z (%Z)")
    return HTMLResponse(f"<p>Phonebook has info for {count} people</p><p>{now}</p>\n")


# --- Error translation ---


async def _malformed_id_handler(request: Request, exc: MalformedIdentifier):
    return _error(400, MALFORMATTED_ID)


async def _structural_failure_handler(
    request: Request, exc: StructuralValidationFailure
):
    return _error(400, exc.message)


async def _request_validation_handler(request: Request, exc: RequestValidationError):
    parts = []
    for err in exc.errors():
        loc = ".".join(str(x) for x in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return _error(400, "; ".join(parts) or "invalid request")


async def _http_exception_handler(request: Request, exc: StarletteHTTPException):
    # A known path without a handler for the method is still an unknown endpoint.
    if exc.status_code in (404, 405):
        return _error(404, UNKNOWN_ENDPOINT)
    return JSONResponse(
        content={"error": exc.detail},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def _unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error(500, "internal server error")


async def _log_requests(request: Request, call_next):
    """One line per request: method, path, status, length, time and body."""
    started = time.perf_counter()
    body = await request.body()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "%s %s %s %s - %.3f ms %s",
        request.method,
        request.url.path,
        response.status_code,
        response.headers.get("content-length", "-"),
        elapsed_ms,
        body.decode("utf-8", errors="replace") or "{}",
    )
    return response


def create_app(
    service: PersonService | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Build the app. Without an injected service one is built from settings at startup."""
    settings = settings or Settings.from_env()
    logging.getLogger().setLevel(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.driver = None
        try:
            if app.state.service is None:
                app.state.service = build_service(settings, app)
            yield
        finally:
            if getattr(app.state, "driver", None) is not None:
                app.state.driver.close()

    app = FastAPI(title="Phonebook API", lifespan=lifespan)
    app.state.service = service
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(_log_requests)

    app.add_exception_handler(MalformedIdentifier, _malformed_id_handler)
    app.add_exception_handler(StructuralValidationFailure, _structural_failure_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)

    app.include_router(router)

    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    return app


app = create_app()
