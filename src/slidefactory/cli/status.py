from pathlib import Path

from . import app


@app.command()
def status(*, workdir: Path = Path()) -> None:
    """Show which files of the presentation in WORKDIR exist.

    Args:
        workdir: Presentation directory

    """
    from rich import print as rich_print
    from rich.table import Table

    from ..configuring.settings import Settings
    from ..pipelines import status

    settings = Settings.from_yaml(workdir)
    table = Table(title=str(settings.paths.current_dir))
    table.add_column("")
    table.add_column("File")
    table.add_column("Size", justify="right")
    table.add_column("Modified")
    for artifact in status(settings):
        if artifact.exists:
            assert artifact.size is not None
            assert artifact.modified is not None
            table.add_row(
                "[green]✓[/]",
                artifact.path.name,
                f"{artifact.size / 1024:.1f} KiB",
                artifact.modified.strftime("%Y-%m-%d %H:%M:%S"),
            )
        else:
            table.add_row("[red]✗[/]", artifact.path.name, "", "")
    rich_print(table)
