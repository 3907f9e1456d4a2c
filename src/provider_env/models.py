from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict


ProviderName = Literal["default", "bedrock", "vertex", "foundry"]


class ValidationReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    provider: ProviderName
    active_flags: tuple[str, ...] = ()
    violations: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.violations


class VariableStatus(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    role: str
    present: bool
