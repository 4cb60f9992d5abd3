from pathlib import Path

from . import app


@app.command()
def init(*, force: bool = False, workdir: Path = Path()) -> None:
    """Write a starter outline.txt and config.yaml in WORKDIR.

    Args:
        force: Overwrite existing files
        workdir: Presentation directory

    """
    from logging import getLogger

    from ..configuring.settings import Settings
    from ..pipelines import init

    logger = getLogger(__name__)
    settings = Settings.from_yaml(workdir)
    for path in init(settings, force=force):
        logger.info(f"Created {path}")
    logger.info(
        f"Next steps: edit [blue]{settings.paths.outline}[/], then run "
        "[blue]slidefactory all[/] and [blue]slidefactory preview[/]",
        extra={"markup": True},
    )
