from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import dotenv_values


class EnvFileError(RuntimeError):
    pass


def load_environment(
    env_file: Path | None = None,
    base: Mapping[str, str] | None = None,
) -> dict[str, str]:
    env = dict(os.environ if base is None else base)
    if env_file is None:
        return env

    if not env_file.is_file():
        raise EnvFileError(f"Env file not found at {env_file}")

    try:
        values = dotenv_values(env_file)
    except (OSError, UnicodeDecodeError) as exc:
        raise EnvFileError(f"Cannot read env file {env_file}: {exc}") from exc

    for key, value in values.items():
        if value is None or env.get(key):
            continue
        env[key] = value
    return env
