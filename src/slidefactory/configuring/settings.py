from functools import reduce
from pathlib import Path
from typing import Any, Literal, Self

from pydantic import BaseModel, Field, PositiveFloat, PositiveInt, ValidationError

from ..exceptions import SlideFactoryError
from ..utils import load_yaml
from .paths import Paths

TransitionStyle = Literal["none", "fade", "slide", "convex", "concave", "zoom"]


class TimingSettings(BaseModel):
    default: PositiveFloat = 5
    """Seconds a slide stays on screen in videos when it doesn't set its own timing."""

    transition: float = Field(default=0.8, ge=0)
    """Seconds waited after moving to a slide before capturing it."""


class TransitionSettings(BaseModel):
    """Transition configuration handed to the renderer."""

    style: TransitionStyle = "fade"
    speed: float = Field(default=0.8, ge=0)

    @property
    def reveal_speed(self) -> Literal["fast", "default", "slow"]:
        """Closest reveal.js speed preset (0.4s, 0.8s and 1.2s respectively)."""
        if self.speed < 0.6:
            return "fast"
        if self.speed > 1.0:
            return "slow"
        return "default"


class VideoSettings(BaseModel):
    width: PositiveInt = 3840
    height: PositiveInt = 2160
    fps: PositiveInt = 30


class PreviewSettings(BaseModel):
    host: str = "127.0.0.1"
    port: int = Field(default=3000, ge=0, le=65535)
    open_browser: bool = True


class Settings(BaseModel):
    theme: str = "minimal"
    transition: TransitionStyle = "fade"
    timing: TimingSettings = Field(default_factory=TimingSettings)
    video: VideoSettings = Field(default_factory=VideoSettings)
    preview: PreviewSettings = Field(default_factory=PreviewSettings)
    paths: Paths

    @property
    def transition_settings(self) -> TransitionSettings:
        return TransitionSettings(style=self.transition, speed=self.timing.transition)

    @classmethod
    def from_yaml(cls, path: Path) -> Self:
        """Load the settings of the presentation in `path`.

        The user configuration file is read first, then the presentation one, the \
        latter overriding top-level keys of the former.

        Args:
            path: Presentation directory.

        Raises:
            SlideFactoryError: Raised if the merged configuration is invalid.

        Returns:
            The resolved settings.
        """
        paths = Paths(current_dir=path)
        content: dict[str, Any] = reduce(
            lambda a, b: {**a, **b},
            (
                _load_config(p)
                for p in (paths.user_config, paths.config)
                if p.is_file()
            ),
            {},
        )
        content.pop("paths", None)
        try:
            return cls.model_validate({**content, "paths": paths})
        except ValidationError as e:
            msg = f"invalid configuration in {paths.user_config} or {paths.config}:\n{e}"
            raise SlideFactoryError(msg) from e

    def override(self, section: str, **values: Any) -> Self:
        """Copy the settings, replacing some values of one of their sections.

        Args:
            section: Name of the section to update, like "video" or "preview".
            values: Replacement values, validated like the configuration files.

        Raises:
            SlideFactoryError: Raised if a replacement value is invalid.

        Returns:
            The updated settings.
        """
        current = getattr(self, section)
        try:
            updated = type(current).model_validate({**current.model_dump(), **values})
        except ValidationError as e:
            msg = f"invalid {section} option:\n{e}"
            raise SlideFactoryError(msg) from e
        return self.model_copy(update={section: updated})


def _load_config(path: Path) -> dict[str, Any]:
    from yaml import YAMLError

    try:
        content = load_yaml(path)
    except (YAMLError, UnicodeDecodeError) as e:
        msg = f"invalid configuration file {path}:\n{e}"
        raise SlideFactoryError(msg) from e
    # An all-comments config file loads as None
    if content is None:
        return {}
    if not isinstance(content, dict):
        msg = (
            f"invalid configuration file {path}: expected a mapping of settings, "
            f"got {type(content).__name__}"
        )
        raise SlideFactoryError(msg)
    return content
