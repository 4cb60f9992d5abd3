"""Step through a rendered deck in a headless browser and capture its frames."""

from collections.abc import Iterator, Sequence
from logging import getLogger
from pathlib import Path

from ..exceptions import CaptureError, DependencyMissingError
from ..models import PresentationDocument
from .protocols import CapturerProtocol

_logger = getLogger(__name__)

_READY_EXPRESSION = "() => typeof Reveal !== 'undefined' && Reveal.isReady()"


def slide_timings(document: PresentationDocument, default: float) -> list[float]:
    """Compute how long each section of the rendered deck stays on screen.

    The rendered deck starts with a title section when the document has a title. \
    That section, and every slide without its own timing, use the default.

    Args:
        document: The document the deck was rendered from.
        default: Default timing in seconds.

    Returns:
        Timings in seconds, in the order of the deck sections.
    """
    timings = [default] if document.title else []
    timings.extend(
        slide.timing if slide.timing is not None else default
        for slide in document.slides
    )
    return timings


def frame_count(timing: float, fps: int) -> int:
    return round(timing * fps)


class PlaywrightCapturer(CapturerProtocol):
    def __init__(
        self,
        width: int,
        height: int,
        fps: int,
        transition_seconds: float,
        ready_timeout_ms: int = 10_000,
    ) -> None:
        self._width = width
        self._height = height
        self._fps = fps
        self._transition_seconds = transition_seconds
        self._ready_timeout_ms = ready_timeout_ms

    def capture(
        self, markup_file: Path, timings: Sequence[float], default_timing: float
    ) -> Iterator[bytes]:
        """Yield the PNG frames of a deck, slide after slide.

        Each slide is captured once its transition is over, and its frame is yielded \
        as many times as needed to fill its timing at the configured frame rate.

        Args:
            markup_file: Rendered deck.
            timings: Timing of each section of the deck, in seconds.
            default_timing: Timing of the sections missing from `timings`.

        Raises:
            DependencyMissingError: Raised if no headless browser is installed.
            CaptureError: Raised if the deck never becomes ready.

        Yields:
            PNG images, one per video frame.
        """
        from playwright.sync_api import Error as PlaywrightError
        from playwright.sync_api import TimeoutError as PlaywrightTimeoutError
        from playwright.sync_api import sync_playwright

        _logger.info(f"Capturing {self._width}x{self._height} @ {self._fps}fps")
        with sync_playwright() as playwright:
            try:
                browser = playwright.chromium.launch(
                    headless=True,
                    args=[f"--window-size={self._width},{self._height}"],
                )
            except PlaywrightError as e:
                msg = (
                    f"could not launch a headless browser ({e}). Install one with: "
                    "playwright install chromium"
                )
                raise DependencyMissingError(msg) from e
            try:
                page = browser.new_page(
                    viewport={"width": self._width, "height": self._height},
                    device_scale_factor=1,
                )
                page.goto(markup_file.resolve().as_uri(), wait_until="networkidle")
                try:
                    page.wait_for_function(
                        _READY_EXPRESSION, timeout=self._ready_timeout_ms
                    )
                except PlaywrightTimeoutError as e:
                    msg = f"reveal.js did not become ready in {markup_file}"
                    raise CaptureError(msg) from e
                total = page.evaluate("() => Reveal.getTotalSlides()")
                _logger.info(f"Found {total} slides")
                for index in range(total):
                    page.evaluate("(index) => Reveal.slide(index)", index)
                    page.wait_for_timeout(self._transition_seconds * 1000)
                    timing = timings[index] if index < len(timings) else default_timing
                    count = frame_count(timing, self._fps)
                    _logger.info(
                        "Slide %d/%d: %ss (%d frames)", index + 1, total, timing, count
                    )
                    frame = page.screenshot(type="png")
                    for _ in range(count):
                        yield frame
            finally:
                browser.close()
