from pathlib import Path

from . import app


@app.command(name="all")
def parse_and_build(*, theme: str | None = None, workdir: Path = Path()) -> None:
    """Parse the outline and build the HTML slides.

    Args:
        theme: Theme overriding the configured one
        workdir: Presentation directory

    """
    from logging import getLogger

    from ..configuring.settings import Settings
    from ..pipelines import parse_and_build

    settings = Settings.from_yaml(workdir)
    if theme is not None:
        settings = settings.model_copy(update={"theme": theme})
    parse_and_build(settings)
    getLogger(__name__).info(
        f"Build complete, preview it with: [blue]slidefactory preview --workdir "
        f"{workdir}[/]",
        extra={"markup": True},
    )
