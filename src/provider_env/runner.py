from __future__ import annotations

import shlex
import subprocess
from collections.abc import Mapping


class RunnerError(RuntimeError):
    pass


def run_with_env(command: list[str], env: Mapping[str, str]) -> int:
    if not command:
        raise RunnerError("No command provided")

    try:
        result = subprocess.run(command, env=dict(env), check=False)
    except FileNotFoundError as exc:
        raise RunnerError(f"Command not found: {command[0]}") from exc
    return result.returncode


def parse_command(raw: str) -> list[str]:
    parts = shlex.split(raw)
    if not parts:
        raise RunnerError("Command parsing produced no arguments")
    return parts
