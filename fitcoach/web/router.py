"""Page router: static table of URL paths bound to named views."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, JSONResponse

from fitcoach.api.errors import NotFoundError, app_error_handler

# Browser URL-bar navigation: every path is a real server URL, no hash fragments.
HISTORY_MODE = "web"

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


@dataclass(frozen=True)
class RouteEntry:
    """Binding of a URL path to a named view template."""

    path: str
    name: str
    view: str


ROUTES: tuple[RouteEntry, ...] = (
    RouteEntry(path="/", name="Home", view="home.html"),
    RouteEntry(path="/schedule", name="Schedule", view="schedule.html"),
)


def _normalize_path(path: str) -> str:
    if len(path) > 1 and path.endswith("/"):
        return path.rstrip("/") or "/"
    return path


def resolve_route(path: str) -> RouteEntry:
    """Return the route bound to ``path``; unknown paths raise NotFoundError.

    Over HTTP every 404 reply goes through ``unmatched_path_handler``.
    """

    normalized = _normalize_path(path)
    for entry in ROUTES:
        if entry.path == normalized:
            return entry
    raise NotFoundError(f"No view is bound to path '{path}'")


def _load_template(name: str) -> str:
    return (TEMPLATES_DIR / name).read_text(encoding="utf-8")


def _page_endpoint(entry: RouteEntry):
    async def render_view() -> HTMLResponse:
        return HTMLResponse(content=_load_template(entry.view))

    render_view.__name__ = f"view_{entry.name.lower()}"
    render_view.__doc__ = f"Serve the {entry.name} view."
    return render_view


router = APIRouter()
for _entry in ROUTES:
    router.add_api_route(
        _entry.path,
        _page_endpoint(_entry),
        methods=["GET"],
        name=_entry.name,
        response_class=HTMLResponse,
        include_in_schema=False,
    )


async def unmatched_path_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render 404 replies with the route table's not-found error."""

    try:
        entry = resolve_route(request.url.path)
    except NotFoundError as not_found:
        return await app_error_handler(request, not_found)
    # Bound path; the 404 came from inside the endpoint.
    return JSONResponse(status_code=404, content={"detail": f"View '{entry.name}' is not available"})
