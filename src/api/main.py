"""
FastAPI backend: submit command text and read the displayed person list.
Run with uvicorn: uvicorn api.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from pydantic import BaseModel

from networkbook.application import Logic, NetworkBookError
from networkbook.config import configure_logging, create_logic, get_settings, load_env
from networkbook.domain import Person

load_env()
_settings = get_settings()
configure_logging(_settings)
logger = logging.getLogger(__name__)


def get_logic(app: FastAPI) -> Logic:
    if getattr(app.state, "logic", None) is None:
        app.state.logic = create_logic(get_settings())
    return app.state.logic


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.logic = None
    try:
        app.state.logic = create_logic(_settings)
    except NetworkBookError as e:
        logger.error("Could not load network book: %s", e)
        raise
    logger.info("Network book API ready (data file: %s)", _settings.data_path)
    yield


app = FastAPI(title="NetworkBook API", lifespan=lifespan)


# --- REST: health ---


@app.get("/health")
def health():
    return {"status": "ok"}


# --- REST: commands ---


class CommandBody(BaseModel):
    text: str


class CommandResponse(BaseModel):
    feedback: str
    ui_action: str


class PersonItem(BaseModel):
    index: int
    name: str
    phones: list[str]
    emails: list[str]
    links: list[str]
    graduation: str | None = None
    courses: list[str]
    specialisations: list[str]
    tags: list[str]
    priority: str | None = None


def _person_item(index: int, person: Person) -> PersonItem:
    return PersonItem(
        index=index,
        name=str(person.name),
        phones=[str(p) for p in person.phones],
        emails=[str(e) for e in person.emails],
        links=[str(link) for link in person.links],
        graduation=person.graduation.full_string() if person.graduation else None,
        courses=[str(c) for c in person.courses],
        specialisations=[str(s) for s in person.specialisations],
        tags=[str(t) for t in person.tags],
        priority=str(person.priority) if person.priority else None,
    )


@app.post("/commands")
def run_command(body: CommandBody, request: Request) -> CommandResponse:
    logic = get_logic(request.app)
    try:
        result = logic.execute(body.text)
    except NetworkBookError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return CommandResponse(feedback=result.feedback, ui_action=result.ui_action.value)


@app.get("/persons")
def list_persons(request: Request) -> list[PersonItem]:
    logic = get_logic(request.app)
    return [
        _person_item(i, person)
        for i, person in enumerate(logic.get_filtered_person_list(), start=1)
    ]
