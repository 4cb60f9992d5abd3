from dataclasses import dataclass


@dataclass(frozen=True)
class EncodeResult:
    ok: bool
    frame_count: int = 0
    stderr: str | None = ""
