from collections.abc import Callable, Iterator
from dataclasses import dataclass
from datetime import datetime
from logging import getLogger
from pathlib import Path
from typing import Any

from .components.factory import SettingsFactory
from .components.serializing import dump_document, load_document_path
from .configuring.settings import Settings
from .exceptions import EncodingError, InputNotFoundError, SlideFactoryError
from .models import EncodeResult, PresentationDocument
from .utils import write_text_atomically

_logger = getLogger(__name__)

OUTLINE_TEMPLATE = """\
# Presentation Title
## Your Name

---

# Introduction

- First key point
- Second key point
- Third key point

---

# Main Content

Explain your main ideas here.

- Supporting point
  - Detail one
  - Detail two

---

# Conclusion

- Summary point one
- Summary point two

---

# Thank You!

Questions?
"""

CONFIG_TEMPLATE = """\
# Presentation-specific config (overrides the user config.yaml)
# Uncomment to customize:

# theme: minimal
# transition: fade
# timing:
#   default: 5
#   transition: 0.8
# video:
#   width: 3840
#   height: 2160
#   fps: 30
"""


def parse(
    settings: Settings, outline: Path | None = None, output: Path | None = None
) -> PresentationDocument:
    outline = outline or settings.paths.outline
    output = output or settings.paths.document
    document = SettingsFactory(settings).parser().parse_path(outline)
    write_text_atomically(output, dump_document(document))
    _logger.info(f"Parsed {len(document.slides)} slides to {output}")
    return document


def build(
    settings: Settings, content: Path | None = None, output: Path | None = None
) -> Path:
    content = content or settings.paths.document
    output = output or settings.paths.markup
    document = load_document_path(content)
    factory = SettingsFactory(settings)
    factory.renderer().render_to_path(
        document, factory.stylesheet(), settings.transition_settings, output
    )
    _logger.info(f"Built {len(document.slides)} slides to {output}")
    return output


def parse_and_build(settings: Settings) -> None:
    parse(settings)
    build(settings)


def render(
    settings: Settings,
    markup: Path | None = None,
    content: Path | None = None,
    output: Path | None = None,
) -> EncodeResult:
    """Capture a rendered deck into a video.

    Args:
        settings: Settings of the presentation.
        markup: Rendered deck. Defaults to the one of the presentation directory.
        content: YAML document the deck was built from, used for slide timings. \
            Defaults to the one of the presentation directory.
        output: Destination of the video. Defaults to the one of the presentation \
            directory.

    Raises:
        InputNotFoundError: Raised if the deck doesn't exist.
        DependencyMissingError: Raised if ffmpeg or the headless browser is missing.
        EncodingError: Raised if ffmpeg fails.

    Returns:
        Result of the encoding.
    """
    from .components.capturer import slide_timings

    markup = (markup or settings.paths.markup).resolve()
    content = content or settings.paths.document
    output = output or settings.paths.video
    if not markup.is_file():
        msg = f"input file not found: {markup}. Run `build` first"
        raise InputNotFoundError(msg)
    factory = SettingsFactory(settings)
    encoder = factory.encoder()
    encoder.check()
    try:
        document = load_document_path(content)
    except SlideFactoryError as e:
        _logger.warning(f"Could not load the content file, using default timing ({e})")
        document = PresentationDocument()
    default_timing = settings.timing.default
    frames = factory.capturer().capture(
        markup, slide_timings(document, default_timing), default_timing
    )
    result = encoder.encode(frames, output)
    if not result.ok:
        msg = f"ffmpeg failed to encode {output}:\n{result.stderr}"
        raise EncodingError(msg)
    size_mb = output.stat().st_size / (1024 * 1024)
    _logger.info(f"Video saved to {output}")
    _logger.info(
        f"Size: {size_mb:.2f} MB, duration: ~{result.frame_count / settings.video.fps:.1f}"
        " seconds"
    )
    return result


def preview(settings: Settings, markup: Path | None = None) -> None:
    from .components.server import serve

    markup = (markup or settings.paths.markup).resolve()
    if not markup.is_file():
        msg = f"file not found: {markup}. Run `build` first"
        raise InputNotFoundError(msg)
    serve(
        markup,
        host=settings.preview.host,
        port=settings.preview.port,
        open_browser=settings.preview.open_browser,
    )


def init(settings: Settings, force: bool = False) -> list[Path]:
    """Write a starter outline and config in the presentation directory.

    Args:
        settings: Settings of the presentation.
        force: Overwrite existing files.

    Returns:
        Paths of the files written.
    """
    written = []
    settings.paths.current_dir.mkdir(parents=True, exist_ok=True)
    for path, content in (
        (settings.paths.outline, OUTLINE_TEMPLATE),
        (settings.paths.config, CONFIG_TEMPLATE),
    ):
        if path.exists() and not force:
            _logger.warning(f"{path} already exists, use --force to overwrite it")
            continue
        path.write_text(content, encoding="utf8")
        written.append(path)
    return written


@dataclass(frozen=True)
class ArtifactStatus:
    path: Path
    exists: bool
    size: int | None = None
    modified: datetime | None = None


def status(settings: Settings) -> Iterator[ArtifactStatus]:
    for path in (
        settings.paths.outline,
        settings.paths.document,
        settings.paths.markup,
        settings.paths.video,
        settings.paths.config,
    ):
        if path.is_file():
            stat = path.stat()
            yield ArtifactStatus(
                path, True, stat.st_size, datetime.fromtimestamp(stat.st_mtime)
            )
        else:
            yield ArtifactStatus(path, False)


def watch(
    workdir: Path,
    function: Callable[[Settings], Any],
    settings_loader: Callable[[Path], Settings] = Settings.from_yaml,
) -> None:
    """Run `function` now and every time the outline, config or themes change.

    Settings are reloaded before each run so that config edits are picked up.

    Args:
        workdir: Presentation directory.
        function: Function to run, given the freshly loaded settings.
        settings_loader: Function loading the settings of `workdir`.
    """
    from watchfiles import watch as watchfiles_watch

    settings = settings_loader(workdir)
    paths = settings.paths
    watched_files = {paths.outline, paths.config, paths.user_config}
    watched_dirs = {paths.themes_dir, paths.user_themes_dir}

    def _filter(_change: Any, path: str) -> bool:
        resolved = Path(path).resolve()
        return resolved in watched_files or resolved.parent in watched_dirs

    to_watch = [paths.current_dir, *(d for d in watched_dirs if d.is_dir())]
    if paths.user_config_dir.is_dir():
        to_watch.append(paths.user_config_dir)

    _logger.info("Initial build")
    _run_logged(function, settings)
    for _ in watchfiles_watch(*to_watch, watch_filter=_filter, raise_interrupt=False):
        _logger.info("Detected changes, starting a new build")
        try:
            settings = settings_loader(workdir)
        except SlideFactoryError as e:
            _logger.error(str(e))
            continue
        _run_logged(function, settings)
    _logger.info("Stopped watching")


def _run_logged(function: Callable[[Settings], Any], settings: Settings) -> None:
    try:
        function(settings)
        _logger.info("Build finished")
    except SlideFactoryError as e:
        _logger.error(str(e))
