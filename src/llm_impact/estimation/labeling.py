"""Map application-facing model labels to catalog entries.

Chat front-ends report models under their own labels. Several of them have
no catalog entry of their own and are estimated with the closest published
model instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from llm_impact.errors import UnknownModelLabel

__all__ = ["APPLICATION_MODEL_MAP", "ModelMapping", "known_labels", "resolve_label"]


@dataclass(frozen=True, slots=True)
class ModelMapping:
    """Catalog coordinates used to estimate an application label."""

    provider: str
    model: str


APPLICATION_MODEL_MAP: Mapping[str, ModelMapping] = MappingProxyType(
    {
        # anthropic
        "claude-3.5-sonnet": ModelMapping("anthropic", "claude-3-5-sonnet-latest"),
        "claude-3.7-sonnet-thought": ModelMapping(
            "anthropic", "claude-3-7-sonnet-latest"
        ),
        "claude-3.7-sonnet": ModelMapping("anthropic", "claude-3-7-sonnet-latest"),
        "claude-sonnet-4": ModelMapping("anthropic", "claude-3-7-sonnet-latest"),
        # google
        "gemini-2.0-flash-001": ModelMapping("google", "gemini-2.0-flash-001"),
        # openai
        "gpt-4.1": ModelMapping("openai", "gpt-4"),
        "gpt-4o": ModelMapping("openai", "gpt-4o"),
        "gpt-4o-mini": ModelMapping("openai", "gpt-4o-mini"),
        "o1-mini": ModelMapping("openai", "o1-mini"),
        "o3-mini": ModelMapping("openai", "o1-mini"),
    }
)


def resolve_label(label: str) -> ModelMapping:
    """Return the catalog coordinates for ``label``.

    Raises:
        UnknownModelLabel: If the label has no mapping.
    """

    try:
        return APPLICATION_MODEL_MAP[label]
    except KeyError:
        raise UnknownModelLabel(label) from None


def known_labels() -> tuple[str, ...]:
    """Return every supported application label, sorted."""

    return tuple(sorted(APPLICATION_MODEL_MAP))
