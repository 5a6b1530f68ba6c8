from __future__ import annotations

from pathlib import Path
from typing import Union

from dotenv import find_dotenv, load_dotenv


PathLike = Union[str, Path]


def load_environment(dotenv_path: PathLike | None = None, *, override: bool = False) -> bool:
    """Pick up ``LINKPARSER_*`` overrides from a .env file.

    ``load_config`` calls this before reading its YAML file, so values from
    the .env take part in the env -> YAML -> default precedence. A variable
    already exported in the shell is left alone unless ``override`` is set.

    Returns:
        True if a .env was found and at least one variable was loaded.
    """

    path = dotenv_path or find_dotenv(usecwd=True)
    if not path:
        return False

    return load_dotenv(dotenv_path=path, override=override)
