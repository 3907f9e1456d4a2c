"""Provider selection and credential checks over an environment snapshot."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence

from provider_env import config
from provider_env.models import ProviderName, ValidationReport, VariableStatus

Environment = Mapping[str, str]


class ConfigurationError(RuntimeError):
    def __init__(self, violations: Sequence[str]) -> None:
        self.violations = tuple(violations)
        super().__init__(format_violations(self.violations))


def format_violations(violations: Sequence[str]) -> str:
    lines = [config.FAILURE_HEADER]
    lines.extend(f"{config.BULLET_PREFIX}{violation}" for violation in violations)
    return "\n".join(lines)


def select_provider(env: Environment) -> ProviderName:
    for provider, flag in config.PROVIDER_FLAGS:
        if _flag_enabled(env, flag):
            return provider
    return "default"


def check_environment(env: Environment | None = None) -> ValidationReport:
    """Collect every violation for the selected provider without raising.

    When several provider flags are set the exclusivity violation is reported
    and only the highest-priority provider's credentials are checked.
    """
    if env is None:
        env = dict(os.environ)

    active_flags = tuple(flag for _, flag in config.PROVIDER_FLAGS if _flag_enabled(env, flag))
    violations: list[str] = []

    if len(active_flags) > 1:
        violations.append(
            "Cannot use multiple providers simultaneously. Please set only one of: "
            f"{config.USE_BEDROCK}, {config.USE_VERTEX}, or {config.USE_FOUNDRY}."
        )

    provider = select_provider(env)
    violations.extend(_PROVIDER_CHECKS[provider](env))

    return ValidationReport(
        provider=provider,
        active_flags=active_flags,
        violations=tuple(violations),
    )


def validate(env: Environment | None = None) -> None:
    report = check_environment(env)
    if not report.ok:
        raise ConfigurationError(report.violations)


def describe_environment(env: Environment | None = None) -> list[VariableStatus]:
    if env is None:
        env = dict(os.environ)

    return [
        VariableStatus(name=name, role=role, present=_is_set(env, name))
        for name, role in config.VARIABLE_ROLES.items()
    ]


def _is_set(env: Environment, name: str) -> bool:
    return bool(env.get(name))


def _flag_enabled(env: Environment, name: str) -> bool:
    return env.get(name) == config.ACTIVE_FLAG_VALUE


def _check_default(env: Environment) -> list[str]:
    has_api_key = _is_set(env, config.ANTHROPIC_API_KEY)
    has_oauth_token = _is_set(env, config.CLAUDE_CODE_OAUTH_TOKEN)
    # Custom endpoints authenticate with either the auth token or the API key.
    has_custom_provider = _is_set(env, config.ANTHROPIC_BASE_URL) and (
        _is_set(env, config.ANTHROPIC_AUTH_TOKEN) or has_api_key
    )

    if has_api_key or has_oauth_token or has_custom_provider:
        return []
    return [
        f"Either {config.ANTHROPIC_API_KEY}, {config.CLAUDE_CODE_OAUTH_TOKEN}, "
        f"or {config.ANTHROPIC_BASE_URL} with authentication is required."
    ]


def _check_bedrock(env: Environment) -> list[str]:
    violations: list[str] = []
    if not _is_set(env, config.AWS_REGION):
        violations.append(f"{config.AWS_REGION} is required when using AWS Bedrock.")

    has_access_keys = _is_set(env, config.AWS_ACCESS_KEY_ID) and _is_set(
        env, config.AWS_SECRET_ACCESS_KEY
    )
    if not has_access_keys and not _is_set(env, config.AWS_BEARER_TOKEN_BEDROCK):
        violations.append(
            f"Either {config.AWS_BEARER_TOKEN_BEDROCK} or both {config.AWS_ACCESS_KEY_ID} "
            f"and {config.AWS_SECRET_ACCESS_KEY} are required when using AWS Bedrock."
        )
    return violations


def _check_vertex(env: Environment) -> list[str]:
    return [
        f"{name} is required when using Google Vertex AI."
        for name in (config.ANTHROPIC_VERTEX_PROJECT_ID, config.CLOUD_ML_REGION)
        if not _is_set(env, name)
    ]


def _check_foundry(env: Environment) -> list[str]:
    if _is_set(env, config.ANTHROPIC_FOUNDRY_RESOURCE) or _is_set(
        env, config.ANTHROPIC_FOUNDRY_BASE_URL
    ):
        return []
    return [
        f"Either {config.ANTHROPIC_FOUNDRY_RESOURCE} or {config.ANTHROPIC_FOUNDRY_BASE_URL} "
        "is required when using Microsoft Foundry."
    ]


_PROVIDER_CHECKS = {
    "default": _check_default,
    "bedrock": _check_bedrock,
    "vertex": _check_vertex,
    "foundry": _check_foundry,
}
