from collections.abc import Iterable
from contextlib import suppress
from logging import getLogger
from pathlib import Path
from shutil import which

from ..exceptions import DependencyMissingError
from ..models import EncodeResult
from .protocols import EncoderProtocol

_logger = getLogger(__name__)


class FfmpegEncoder(EncoderProtocol):
    """Encode PNG frames piped to ffmpeg into an H.264 MP4."""

    def __init__(
        self, fps: int, crf: int = 18, preset: str = "slow", binary: str = "ffmpeg"
    ) -> None:
        self._fps = fps
        self._crf = crf
        self._preset = preset
        self._binary = binary

    def check(self) -> None:
        if which(self._binary) is None:
            msg = (
                f"{self._binary} is not installed or not in PATH. Install it:\n"
                "  macOS:   brew install ffmpeg\n"
                "  Ubuntu:  sudo apt install ffmpeg\n"
                "  Windows: https://ffmpeg.org/download.html"
            )
            raise DependencyMissingError(msg)

    def command(self, output_path: Path) -> list[str]:
        return [
            self._binary,
            "-y",
            "-loglevel",
            "error",
            "-f",
            "image2pipe",
            "-framerate",
            str(self._fps),
            "-i",
            "-",
            "-c:v",
            "libx264",
            "-preset",
            self._preset,
            "-crf",
            str(self._crf),
            "-pix_fmt",
            "yuv420p",
            "-movflags",
            "+faststart",
            str(output_path),
        ]

    def encode(self, frames: Iterable[bytes], output_path: Path) -> EncodeResult:
        """Encode frames into `output_path`.

        The video is first written next to `output_path` and only moved over it once \
        ffmpeg succeeded.

        Args:
            frames: PNG frames, in order.
            output_path: Destination of the video.

        Raises:
            DependencyMissingError: Raised if ffmpeg cannot be found.

        Returns:
            Whether the encoding succeeded, with the number of frames and ffmpeg's \
            error output.
        """
        from subprocess import PIPE, Popen
        from tempfile import TemporaryFile

        self.check()
        output_path.parent.mkdir(parents=True, exist_ok=True)
        partial_path = output_path.with_name(f".{output_path.stem}.partial.mp4")
        command = self.command(partial_path)
        _logger.debug("Encoder command: %s", " ".join(command))
        count = 0
        try:
            with TemporaryFile("w+", encoding="utf8") as stderr:
                process = Popen(command, stdin=PIPE, stderr=stderr)
                assert process.stdin is not None
                try:
                    for frame in frames:
                        process.stdin.write(frame)
                        count += 1
                except BrokenPipeError:
                    _logger.warning("Encoder stopped reading frames early")
                finally:
                    with suppress(BrokenPipeError):
                        process.stdin.close()
                    returncode = process.wait()
                stderr.seek(0)
                errors = stderr.read()
            if returncode != 0:
                return EncodeResult(False, count, errors)
            partial_path.replace(output_path)
            return EncodeResult(True, count, errors)
        finally:
            with suppress(FileNotFoundError):
                partial_path.unlink()
