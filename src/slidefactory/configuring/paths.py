from pathlib import Path
from typing import Annotated, Any

from appdirs import user_config_dir as appdirs_user_config_dir
from pydantic import AfterValidator, BaseModel, Field

from .. import app_name


def _join(base_key: str, to_add: str) -> Path:
    return Field(default_factory=lambda data: data[base_key] / to_add)


_Path = Annotated[Path, AfterValidator(Path.resolve)]


class Paths(BaseModel):
    """Locations of the files of a presentation and of the user configuration.

    A presentation lives in its own directory (the current directory): the outline, \
    the files generated from it and an optional config override all sit side by side.
    """

    current_dir: _Path
    user_config_dir: _Path = Field(
        default_factory=lambda: Path(appdirs_user_config_dir(app_name))
    )
    outline: _Path = _join("current_dir", "outline.txt")
    document: _Path = _join("current_dir", "slides.yaml")
    markup: _Path = _join("current_dir", "slides.html")
    video: _Path = _join("current_dir", "slides.mp4")
    config: _Path = _join("current_dir", "config.yaml")
    themes_dir: _Path = _join("current_dir", "themes")
    user_config: _Path = _join("user_config_dir", "config.yaml")
    user_themes_dir: _Path = _join("user_config_dir", "themes")

    def model_post_init(self, __context: Any) -> None:
        for field, value in self.__dict__.items():
            setattr(self, field, value.resolve())
