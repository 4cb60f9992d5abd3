from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..configuring.settings import TransitionSettings
    from ..models import EncodeResult, PresentationDocument


class ParserProtocol(Protocol):
    """Build a presentation document from an outline."""

    def parse(self, text: str) -> "PresentationDocument":
        """Parse an outline.

        Args:
            text: Content of the outline.

        Returns:
            The parsed document. Never raises on content alone.
        """

    def parse_path(self, outline_path: Path) -> "PresentationDocument": ...


class RendererProtocol(Protocol):
    def render_to_str(
        self,
        document: "PresentationDocument",
        stylesheet: str,
        transition: "TransitionSettings",
    ) -> str: ...

    def render_to_path(
        self,
        document: "PresentationDocument",
        stylesheet: str,
        transition: "TransitionSettings",
        output_path: Path,
    ) -> None: ...


class CapturerProtocol(Protocol):
    def capture(
        self, markup_file: Path, timings: Sequence[float], default_timing: float
    ) -> Iterator[bytes]: ...


class EncoderProtocol(Protocol):
    def check(self) -> None: ...

    def encode(self, frames: Iterable[bytes], output_path: Path) -> "EncodeResult": ...


class FactoryProtocol(Protocol):
    def parser(self) -> ParserProtocol: ...

    def renderer(self) -> RendererProtocol: ...

    def capturer(self) -> CapturerProtocol: ...

    def encoder(self) -> EncoderProtocol: ...
