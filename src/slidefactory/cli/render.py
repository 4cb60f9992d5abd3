from pathlib import Path

from . import app


@app.command()
def render(
    *,
    input: Path | None = None,  # noqa: A002
    content: Path | None = None,
    output: Path | None = None,
    fps: int | None = None,
    width: int | None = None,
    height: int | None = None,
    workdir: Path = Path(),
) -> None:
    """Capture the HTML slides into an MP4 video.

    Args:
        input: HTML slides to capture. Defaults to slides.html in WORKDIR
        content: YAML document holding the slide timings. Defaults to slides.yaml \
            in WORKDIR
        output: Video to write. Defaults to slides.mp4 in WORKDIR
        fps: Frames per second
        width: Video width
        height: Video height
        workdir: Presentation directory

    """
    from ..configuring.settings import Settings
    from ..pipelines import render

    settings = Settings.from_yaml(workdir)
    overrides = {
        key: value
        for key, value in (("fps", fps), ("width", width), ("height", height))
        if value is not None
    }
    if overrides:
        settings = settings.override("video", **overrides)
    render(settings, markup=input, content=content, output=output)
