from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from starlette.concurrency import run_in_threadpool

from appender.config import Settings
from appender.files.append import append_text
from appender.files.lister import list_files
from appender.render import render_page
from appender.web.forms import read_raw_form


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def file_selector(settings: Settings = Depends(get_settings)):
    files = list_files(settings.files_dir)
    return HTMLResponse(render_page(settings.template_path, files))


async def append(request: Request, settings: Settings = Depends(get_settings)):
    form = await read_raw_form(request)
    file = form.get("file", b"")
    if not file:
        raise HTTPException(422, "Missing form field: file")

    # text is written byte for byte; file names map onto os paths the way os.fsdecode does
    await run_in_threadpool(
        append_text,
        settings.files_dir,
        file.decode("utf-8", errors="surrogateescape"),
        form.get("text", b""),
    )
    return RedirectResponse("/", status_code=303)


async def health():
    return {"status": "ok"}


def build_router() -> APIRouter:
    """Build the router; only POST is registered on /append so other methods get 405."""
    router = APIRouter(tags=["files"])
    router.add_api_route("/", file_selector, methods=["GET"], response_class=HTMLResponse)
    router.add_api_route("/append", append, methods=["POST"])
    router.add_api_route("/health", health, methods=["GET"])
    return router
