"""Kernel tolerance and strictness settings."""

from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field


class KernelConfig(BaseModel):
    """Numeric settings shared by every kernel operation.

    Unknown keys are rejected so a misspelled setting in a profile fails
    validation instead of silently keeping its default.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    eps: float = Field(
        default=1e-9,
        gt=0,
        description="Tolerance for collinearity and floating-point point equality",
    )
    strict: bool = Field(
        default=False,
        description="Raise on degenerate input instead of returning a fallback value",
    )
    brute_force_cutoff: int = Field(
        default=3,
        ge=2,
        description="Closest-pair range size solved by pairwise comparison",
    )

    @classmethod
    def from_yaml(cls, yaml_content: str) -> "KernelConfig":
        """Parse a YAML mapping of settings; an empty document gives the defaults."""
        return cls.model_validate(yaml.safe_load(yaml_content) or {})

    def merge_override(self, override: dict[str, Any]) -> "KernelConfig":
        """Return a copy with ``override`` applied.

        A ``None`` value resets that setting to its default. The result is
        validated like a freshly loaded config.
        """
        settings = self.model_dump()
        for key, value in override.items():
            if value is None:
                settings.pop(key, None)
            else:
                settings[key] = value
        return KernelConfig.model_validate(settings)
