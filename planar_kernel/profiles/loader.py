"""Named tolerance profiles.

A profile is a YAML mapping of ``KernelConfig`` settings. Its first line
may be a ``#`` comment, which is shown as the profile's description:

    # Loose 1e-6 tolerance for noisy single-precision sources
    eps: 1.0e-6
    strict: false

Bundled profiles live beside this module; every function also accepts a
``directory`` so projects can keep their own.
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ..models.config import KernelConfig

logger = logging.getLogger(__name__)

PROFILES_DIR = Path(__file__).parent
PROFILE_SUFFIX = ".yaml"


def get_profile_path(name: str = "default", directory: Path | None = None) -> Path:
    """Resolve a profile name to its YAML file.

    Raises:
        FileNotFoundError: If no such profile exists in ``directory``
    """
    path = (directory or PROFILES_DIR) / f"{name}{PROFILE_SUFFIX}"
    if not path.is_file():
        raise FileNotFoundError(f"No tolerance profile '{name}' in {path.parent}")
    return path


def _description(text: str) -> str:
    first = text.lstrip().partition("\n")[0]
    return first.lstrip("#").strip() if first.startswith("#") else ""


def list_profiles(directory: Path | None = None) -> list[dict[str, str]]:
    """Name and description of every profile, sorted by name."""
    return [
        {"name": path.stem, "description": _description(path.read_text())}
        for path in sorted((directory or PROFILES_DIR).glob(f"*{PROFILE_SUFFIX}"))
    ]


def load_profile(
    name: str = "default",
    override: dict[str, Any] | None = None,
    directory: Path | None = None,
) -> KernelConfig:
    """Load a profile, then apply ``override`` on top of it.

    Raises:
        FileNotFoundError: If the profile does not exist
        pydantic.ValidationError: If the profile or the override holds an
            invalid setting
    """
    path = get_profile_path(name, directory)
    config = KernelConfig.from_yaml(path.read_text())
    logger.debug(f"Loaded profile '{name}': eps={config.eps}, strict={config.strict}")

    if override:
        config = config.merge_override(override)
        logger.debug(f"Profile '{name}' overridden with {sorted(override)}")
    return config


def save_profile(
    config: KernelConfig,
    name: str,
    directory: Path | None = None,
    description: str | None = None,
) -> Path:
    """Write ``config`` as a profile, with ``description`` as its header comment."""
    path = (directory or PROFILES_DIR) / f"{name}{PROFILE_SUFFIX}"
    header = f"# {description}\n" if description else ""
    path.write_text(header + yaml.safe_dump(config.model_dump(), sort_keys=False))
    logger.info(f"Saved tolerance profile '{name}' to {path}")
    return path


def validate_profile_yaml(yaml_content: str) -> tuple[bool, str | None]:
    """Check that YAML text parses to a valid ``KernelConfig``.

    Returns:
        ``(True, None)`` when valid, otherwise ``(False, reason)``
    """
    try:
        KernelConfig.from_yaml(yaml_content)
    except (yaml.YAMLError, ValidationError) as e:
        return False, str(e)
    return True, None
