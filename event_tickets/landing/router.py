from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from event_tickets.landing.page import render_landing_page

router = APIRouter()

_LANDING_HTML = render_landing_page()


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def landing_page() -> HTMLResponse:
    return HTMLResponse(content=_LANDING_HTML)
