"""
Random User Sandbox
===================

FastAPI app serving a page of randomly generated people
(https://randomuser.me) as cards, with gender filters, sorting and a count
selector.

Run:
----
uvicorn sandbox_app:app --reload --port 8000
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse

from people_state import PeopleState, SandboxController, SortKey, build_controller
from person_cards import render_cards
from randomuser_api import RandomUserError, UpstreamError, fetch_greeting
from randomuser_models import (
    CountRequest,
    GenderFilterRequest,
    GreetingResponse,
    PeopleResponse,
    PeopleView,
)
from sandbox_logging import init_logging
from sandbox_settings import get_settings
from sandbox_ui import render_page


logger = logging.getLogger(__name__)

_controller: Optional[SandboxController] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_logging()
    yield


app = FastAPI(title="Random User Sandbox", version="1.0.0", lifespan=lifespan)


def get_controller() -> SandboxController:
    # One controller per process: the demo serves a single page session.
    global _controller
    if _controller is None:
        _controller = build_controller(get_settings())
    return _controller


def _view(state: PeopleState, superseded: bool = False) -> PeopleView:
    html = render_cards(state.displayed, date_format=get_settings().date_format)
    return PeopleView(
        displayed=len(state.displayed),
        total=len(state.authoritative),
        superseded=superseded,
        html=html,
    )


@app.exception_handler(RandomUserError)
async def random_user_error_handler(request: Request, exc: RandomUserError) -> JSONResponse:
    status = exc.status_code if isinstance(exc, UpstreamError) else None
    logger.warning("randomuser.me call failed for %s: %s (status=%s)", request.url.path, exc, status)
    return JSONResponse(status_code=502, content={"detail": str(exc)})


# ----------------------------
# Page
# ----------------------------

@app.get("/", response_class=HTMLResponse)
def index() -> str:
    return render_page(get_settings().initial_count)


# ----------------------------
# API endpoints
# ----------------------------

@app.get("/api/greeting", response_model=GreetingResponse)
async def greeting(controller: SandboxController = Depends(get_controller)):
    text = await fetch_greeting(controller.client)
    return {"greeting": text}


@app.post("/api/session", response_model=PeopleView)
async def start_session(controller: SandboxController = Depends(get_controller)):
    # Page (re)load: drop the cache and load the initial people.
    applied = await controller.start_session(get_settings().initial_count)
    return _view(controller.state, superseded=not applied)


@app.post("/api/people/count", response_model=PeopleView)
async def set_count(req: CountRequest, controller: SandboxController = Depends(get_controller)):
    applied = await controller.request_count(req.count)
    return _view(controller.state, superseded=not applied)


@app.post("/api/people/show-all", response_model=PeopleView)
async def show_all(controller: SandboxController = Depends(get_controller)):
    return _view(controller.show_all())


@app.post("/api/people/filter", response_model=PeopleView)
async def filter_people(req: GenderFilterRequest, controller: SandboxController = Depends(get_controller)):
    return _view(controller.filter_by_gender(req.gender))


@app.post("/api/people/sort/{key}", response_model=PeopleView)
async def sort_people(key: SortKey, controller: SandboxController = Depends(get_controller)):
    return _view(controller.sort_by(key))


@app.get("/api/people", response_model=PeopleResponse)
async def list_people(controller: SandboxController = Depends(get_controller)):
    state = controller.state
    return {
        "displayed": len(state.displayed),
        "total": len(state.authoritative),
        "people": list(state.displayed),
    }
