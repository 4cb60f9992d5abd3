from pathlib import Path

from . import app


@app.command()
def build(
    *,
    content: Path | None = None,
    output: Path | None = None,
    theme: str | None = None,
    workdir: Path = Path(),
) -> None:
    """Build the HTML slides from the YAML document.

    Args:
        content: YAML document to build. Defaults to slides.yaml in WORKDIR
        output: HTML file to write. Defaults to slides.html in WORKDIR
        theme: Theme overriding the configured one
        workdir: Presentation directory

    """
    from ..configuring.settings import Settings
    from ..pipelines import build

    settings = Settings.from_yaml(workdir)
    if theme is not None:
        settings = settings.model_copy(update={"theme": theme})
    build(settings, content=content, output=output)
