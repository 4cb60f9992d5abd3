from pathlib import Path

from . import app


@app.command()
def parse(
    outline: Path | None = None,
    /,
    *,
    output: Path | None = None,
    workdir: Path = Path(),
) -> None:
    """Parse the plain-text OUTLINE into a YAML document.

    Args:
        outline: Outline to parse. Defaults to outline.txt in WORKDIR
        output: YAML file to write. Defaults to slides.yaml in WORKDIR
        workdir: Presentation directory

    """
    from ..configuring.settings import Settings
    from ..pipelines import parse

    parse(Settings.from_yaml(workdir), outline=outline, output=output)
