from pathlib import Path

from . import app


@app.command()
def preview(
    *,
    file: Path | None = None,
    port: int | None = None,
    open: bool | None = None,  # noqa: A002
    workdir: Path = Path(),
) -> None:
    """Serve the HTML slides locally and open them in a browser.

    Args:
        file: HTML file to serve. Defaults to slides.html in WORKDIR
        port: Server port
        open: Open the browser automatically
        workdir: Presentation directory

    """
    from ..configuring.settings import Settings
    from ..pipelines import preview

    settings = Settings.from_yaml(workdir)
    overrides = {
        key: value
        for key, value in (("port", port), ("open_browser", open))
        if value is not None
    }
    if overrides:
        settings = settings.override("preview", **overrides)
    preview(settings, markup=file)
