from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from toggle_demo.state import PluginState, get_plugin_state

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = BASE_DIR / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["web"])


@router.get("/login", response_class=HTMLResponse)
async def login_form(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(request, "login.html", {"title": "Login"})


@router.post("/login")
async def login_submit(
    user: str | None = Form(default=None),
    password: str | None = Form(default=None, alias="pass"),  # noqa: ARG001
) -> RedirectResponse:
    # No credential check: any submission, including an empty one, logs in.
    logger.info("Login submitted for user %r", user or "")
    return RedirectResponse(url="/dashboard", status_code=302)


@router.get("/dashboard", response_class=HTMLResponse)
async def dashboard(
    request: Request,
    state: PluginState = Depends(get_plugin_state),  # noqa: B008
) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {"title": "Dashboard", "plugin_status": state.status_label},
    )


@router.post("/toggle")
async def toggle(
    state: PluginState = Depends(get_plugin_state),  # noqa: B008
) -> RedirectResponse:
    enabled = state.toggle()
    logger.info("Plugin A toggled %s", "ON" if enabled else "OFF")
    return RedirectResponse(url="/dashboard", status_code=302)
