"""Serve a rendered deck and its assets over HTTP for previewing."""

from logging import getLogger
from mimetypes import guess_type
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fastapi import FastAPI

_logger = getLogger(__name__)


class ForbiddenPathError(Exception):
    pass


def guess_media_type(path: Path) -> str:
    media_type, _ = guess_type(path.name)
    return media_type or "application/octet-stream"


def resolve_request(root: Path, requested_path: str, index: str) -> Path | None:
    """Map a requested URL path to a file under `root`.

    Args:
        root: Directory being served.
        requested_path: Percent-decoded path part of the request URL.
        index: Name of the file served for `/`.

    Raises:
        ForbiddenPathError: Raised if the path resolves outside of `root`.

    Returns:
        Path of the file to serve, or None if there is no such file.
    """
    root = root.resolve()
    relative = PurePosixPath(requested_path.lstrip("/"))
    if relative in (PurePosixPath(), PurePosixPath(".")):
        relative = PurePosixPath(index)
    candidate = (root / relative).resolve()
    if not candidate.is_relative_to(root):
        raise ForbiddenPathError(requested_path)
    if not candidate.is_file():
        return None
    return candidate


def create_app(root: Path, index: str) -> "FastAPI":
    from fastapi import FastAPI
    from fastapi.responses import FileResponse, PlainTextResponse, Response

    app = FastAPI(docs_url=None, redoc_url=None, openapi_url=None)

    @app.get("/{requested_path:path}")
    def serve_file(requested_path: str) -> Response:
        try:
            path = resolve_request(root, requested_path, index)
        except ForbiddenPathError:
            _logger.warning("Refused to serve %s", requested_path)
            return PlainTextResponse("Forbidden", status_code=403)
        if path is None:
            return PlainTextResponse("Not found", status_code=404)
        return FileResponse(path, media_type=guess_media_type(path))

    return app


def serve(markup_file: Path, host: str, port: int, open_browser: bool) -> None:
    import uvicorn

    url = f"http://{'localhost' if host == '127.0.0.1' else host}:{port}"
    _logger.info(f"Preview server running at {url}, press Ctrl+C to stop")
    _logger.info(
        "In the presentation: arrows/space to navigate, F for fullscreen, "
        "S for speaker notes, O for overview, Esc to leave fullscreen/overview"
    )
    if open_browser:
        from click import launch

        launch(url)
    uvicorn.run(
        create_app(markup_file.parent, markup_file.name),
        host=host,
        port=port,
        log_level="warning",
    )
