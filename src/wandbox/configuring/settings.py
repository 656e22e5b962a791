from functools import reduce
from pathlib import Path
from typing import Any, Self

from appdirs import user_config_dir as appdirs_user_config_dir
from pydantic import BaseModel, ConfigDict, Field, PositiveFloat

from .. import app_name
from ..client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, Wandbox
from ..utils import load_all_yamls

settings_filename = f"{app_name}.yml"
_user_config_dir = Path(appdirs_user_config_dir(app_name)).resolve()


def settings_paths(current_dir: Path) -> list[Path]:
    """List the settings files that apply to a directory, by increasing priority.

    Args:
        current_dir: Directory the settings are resolved for.

    Returns:
        Paths of the settings files that exist.
    """
    return [
        path
        for directory in (_user_config_dir, current_dir.resolve())
        if (path := directory / settings_filename).is_file()
    ]


class Settings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    base_url: str = DEFAULT_BASE_URL
    timeout: PositiveFloat = DEFAULT_TIMEOUT
    save: bool = False
    default_options: tuple[str, ...] = ()
    ignored_compilers: frozenset[str] = Field(default_factory=frozenset)
    ignored_languages: frozenset[str] = Field(default_factory=frozenset)

    @classmethod
    def from_yaml(cls, path: Path) -> Self:
        """Load the settings applying to a directory.

        The user config directory is searched first, then the directory given as \
        argument. Values found in later files override earlier ones.

        Args:
            path: Directory to resolve the settings for.

        Returns:
            The merged settings, defaults filling the gaps.
        """
        content: dict[str, Any] = reduce(
            lambda a, b: {**a, **b},
            (c for c in load_all_yamls(settings_paths(path)) if c),
            {},
        )
        return cls.model_validate(content)

    def client(self) -> Wandbox:
        return Wandbox(base_url=self.base_url, timeout=self.timeout)
