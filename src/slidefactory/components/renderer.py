from collections.abc import Iterable
from functools import cached_property
from logging import getLogger
from pathlib import Path

from jinja2 import Environment, PackageLoader, StrictUndefined, select_autoescape

from .. import app_name
from ..configuring.settings import TransitionSettings
from ..models import PresentationDocument
from ..utils import write_text_atomically
from .bullets import nest_bullets
from .protocols import RendererProtocol

_logger = getLogger(__name__)

_TEMPLATE = "slides.html.j2"
_FALLBACK_THEME = "minimal"


def builtin_stylesheet() -> str:
    from importlib.resources import files

    return (files(app_name) / "themes" / "default.css").read_text(encoding="utf8")


def resolve_stylesheet(theme: str, themes_dirs: Iterable[Path]) -> str:
    """Find the stylesheet of a theme.

    The theme is looked up as `<theme>.css` in each directory, in order. If it cannot \
    be found, the minimal theme is looked up the same way, and if that fails too, the \
    stylesheet bundled with the package is used.

    Args:
        theme: Name of the theme.
        themes_dirs: Directories to search, by decreasing priority.

    Returns:
        Content of the stylesheet.
    """
    dirs = list(themes_dirs)
    candidates = [theme] if theme == _FALLBACK_THEME else [theme, _FALLBACK_THEME]
    for candidate in candidates:
        for themes_dir in dirs:
            path = themes_dir / f"{candidate}.css"
            if path.is_file():
                if candidate != theme:
                    _logger.warning(
                        'Theme "%s" not found, using %s instead', theme, path
                    )
                return path.read_text(encoding="utf8")
    if theme != _FALLBACK_THEME:
        _logger.warning('Theme "%s" not found, using the built-in stylesheet', theme)
    return builtin_stylesheet()


class HtmlRenderer(RendererProtocol):
    """Render presentation documents into reveal.js pages."""

    def __init__(self, default_timing: float) -> None:
        self._default_timing = default_timing

    def render_to_str(
        self,
        document: PresentationDocument,
        stylesheet: str,
        transition: TransitionSettings,
    ) -> str:
        template = self._env.get_template(_TEMPLATE)
        return template.render(
            document=document,
            stylesheet=stylesheet,
            transition=transition,
            default_timing=self._default_timing,
        )

    def render_to_path(
        self,
        document: PresentationDocument,
        stylesheet: str,
        transition: TransitionSettings,
        output_path: Path,
    ) -> None:
        rendered = self.render_to_str(document, stylesheet, transition)
        if not write_text_atomically(output_path, rendered + "\n"):
            _logger.debug("%s is already up to date", output_path)

    @cached_property
    def _env(self) -> Environment:
        env = Environment(
            loader=PackageLoader(app_name, "templates"),
            autoescape=select_autoescape(
                enabled_extensions=("html", "j2"), default_for_string=True
            ),
            undefined=StrictUndefined,
            trim_blocks=True,
        )
        env.filters["nest_bullets"] = nest_bullets
        return env
