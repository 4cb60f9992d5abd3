from pathlib import Path

from . import app


@app.command()
def watch(*, theme: str | None = None, workdir: Path = Path()) -> None:
    """Parse and build again every time the outline, config or themes change.

    Args:
        theme: Theme overriding the configured one
        workdir: Presentation directory

    """
    from logging import getLogger

    from ..configuring.settings import Settings
    from ..pipelines import parse_and_build, watch

    def load(path: Path) -> Settings:
        settings = Settings.from_yaml(path)
        if theme is not None:
            settings = settings.model_copy(update={"theme": theme})
        return settings

    getLogger(__name__).info(f"Watching {workdir.resolve()}")
    watch(workdir, parse_and_build, settings_loader=load)
