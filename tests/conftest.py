from pathlib import Path
from typing import Any

from pytest import fixture


@fixture(autouse=True)
def user_config_dir(tmp_path: Path, monkeypatch: Any) -> Path:
    user_config_dir = tmp_path / "user-config"
    monkeypatch.setattr(
        "slidefactory.configuring.paths.appdirs_user_config_dir",
        lambda _: str(user_config_dir),
    )
    return user_config_dir
