from typing import TYPE_CHECKING

from .protocols import (
    CapturerProtocol,
    EncoderProtocol,
    FactoryProtocol,
    ParserProtocol,
    RendererProtocol,
)

if TYPE_CHECKING:
    from ..configuring.settings import Settings


class SettingsFactory(FactoryProtocol):
    def __init__(self, settings: "Settings") -> None:
        self._settings = settings

    def parser(self) -> ParserProtocol:
        from .parser import OutlineParser

        return OutlineParser()

    def renderer(self) -> RendererProtocol:
        from .renderer import HtmlRenderer

        return HtmlRenderer(default_timing=self._settings.timing.default)

    def stylesheet(self) -> str:
        from .renderer import resolve_stylesheet

        return resolve_stylesheet(
            self._settings.theme,
            (self._settings.paths.themes_dir, self._settings.paths.user_themes_dir),
        )

    def capturer(self) -> CapturerProtocol:
        from .capturer import PlaywrightCapturer

        return PlaywrightCapturer(
            width=self._settings.video.width,
            height=self._settings.video.height,
            fps=self._settings.video.fps,
            transition_seconds=self._settings.timing.transition,
        )

    def encoder(self) -> EncoderProtocol:
        from .encoder import FfmpegEncoder

        return FfmpegEncoder(fps=self._settings.video.fps)
