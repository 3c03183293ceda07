"""Named kernel tolerance profiles stored as YAML."""

from .loader import (
    get_profile_path,
    list_profiles,
    load_profile,
    save_profile,
    validate_profile_yaml,
)

__all__ = [
    "get_profile_path",
    "list_profiles",
    "load_profile",
    "save_profile",
    "validate_profile_yaml",
]
