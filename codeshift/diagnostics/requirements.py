"""Startup requirement checks.

This module performs best-effort checks for things Python packaging cannot
guarantee: a model server that is actually running, and the configured models
being available on it.

The health endpoint reports these; translation requests are not blocked by them.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
import logging
import sys

import httpx

from codeshift.models import models_for_provider
from codeshift.providers.base import ProviderRegistry
from codeshift.providers.lmstudio import LMStudioProvider

logger = logging.getLogger(__name__)

DOCS_URL = "https://lmstudio.ai/docs/app/api/endpoints/openai"


@dataclass(frozen=True)
class RequirementIssue:
    id: str
    title: str
    details: str
    severity: str = "error"  # "error" | "warning"

    def to_dict(self) -> dict:
        return asdict(self)


def check_startup_requirements(registry: ProviderRegistry) -> list[RequirementIssue]:
    issues: list[RequirementIssue] = []

    if sys.version_info < (3, 10):
        issues.append(
            RequirementIssue(
                id="python_version",
                title="Python >= 3.10",
                details=f"Current version: {sys.version.split()[0]}",
                severity="error",
            )
        )

    for provider in registry:
        if not provider.is_available():
            issues.append(
                RequirementIssue(
                    id=f"{provider.id}_unreachable",
                    title=f"Provider '{provider.id}' is not reachable",
                    details=_unreachable_details(provider),
                    severity="error",
                )
            )
            continue

        if isinstance(provider, LMStudioProvider):
            issue = _check_lmstudio_models(provider)
            if issue is not None:
                issues.append(issue)

    return issues


def _unreachable_details(provider) -> str:
    if isinstance(provider, LMStudioProvider):
        return (
            f"No answer from {provider.config.base_url}. Start LM Studio and enable "
            "its local server (Developer tab, or 'lms server start')."
        )
    return "The provider did not respond to its availability check."


def _check_lmstudio_models(provider: LMStudioProvider) -> RequirementIssue | None:
    """Warn about configured models the server does not list.

    LM Studio can load a model on first use, so a missing id is only a warning.
    """
    try:
        served = set(provider.list_models())
    except httpx.HTTPError as exc:
        logger.warning("Could not list LM Studio models: %s", exc)
        return None

    missing = [m.id for m in models_for_provider(provider.id) if m.id not in served]
    if not missing:
        return None

    return RequirementIssue(
        id=f"{provider.id}_models",
        title="Configured models not reported by LM Studio",
        details=(
            "Missing: "
            + ", ".join(missing)
            + ". Download them in LM Studio (e.g. 'lms get <model>') or load them before translating."
        ),
        severity="warning",
    )
