"""Per-environment deployment profiles.

Profiles are read from the bundled profiles.yaml using ruamel.yaml. Each one
carries the default branch, whether the API URL is reported, the ordered
status steps, and the public URL announced at the end of a run.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from fireworks_stand.core.errors import ProfileLoadError, UnknownEnvironmentError

logger = logging.getLogger(__name__)

PROFILES_FILE = Path(__file__).resolve().parent / "profiles.yaml"

_REQUIRED_KEYS = ("name", "default_branch", "steps", "url")


@dataclass(frozen=True)
class EnvironmentProfile:
    """Message set and defaults for one deployment environment.

    Attributes:
        name: Environment name used in status lines ("development", ...)
        default_branch: Branch used when BRANCH_NAME is not set
        steps: Status lines printed in order, without the trailing "..."
        url: Address reported once the run completes
        show_api_url: Whether NEXT_PUBLIC_API_URL is echoed
        aliases: Alternative names accepted by get_profile()
    """
    name: str
    default_branch: str
    steps: Tuple[str, ...]
    url: str
    show_api_url: bool = False
    aliases: Tuple[str, ...] = field(default_factory=tuple)

    def matches(self, name: str) -> bool:
        key = name.strip().lower()
        return key == self.name or key in self.aliases


def _create_yaml_instance() -> YAML:
    return YAML(typ="safe", pure=True)


def _parse_profile(raw: Any, source: str) -> EnvironmentProfile:
    if not isinstance(raw, dict):
        raise ProfileLoadError(f"Profile entry must be a mapping, got {type(raw).__name__}", source)

    missing = [key for key in _REQUIRED_KEYS if key not in raw]
    if missing:
        raise ProfileLoadError(
            f"Profile {raw.get('name', '<unnamed>')!r} is missing: {', '.join(missing)}", source
        )

    steps = raw["steps"]
    if not isinstance(steps, list) or not all(isinstance(s, str) for s in steps):
        raise ProfileLoadError(f"Profile {raw['name']!r}: steps must be a list of strings", source)

    return EnvironmentProfile(
        name=str(raw["name"]).lower(),
        default_branch=str(raw["default_branch"]),
        steps=tuple(steps),
        url=str(raw["url"]),
        show_api_url=bool(raw.get("show_api_url", False)),
        aliases=tuple(str(a).lower() for a in raw.get("aliases") or ()),
    )


def load_profiles(path: Optional[str] = None) -> List[EnvironmentProfile]:
    """Load deployment profiles from YAML.

    Args:
        path: YAML file to read (defaults to the bundled profiles.yaml)

    Returns:
        Profiles in file order

    Raises:
        ProfileLoadError: If the file is unreadable or malformed
    """
    source = Path(path) if path is not None else PROFILES_FILE

    try:
        data: Dict[str, Any] = _create_yaml_instance().load(source.read_text(encoding="utf-8"))
    except (OSError, YAMLError) as e:
        raise ProfileLoadError(f"Cannot read profiles: {e}", str(source)) from e

    if not isinstance(data, dict) or not isinstance(data.get("profiles"), list):
        raise ProfileLoadError("Expected a top-level 'profiles' list", str(source))

    profiles = [_parse_profile(raw, str(source)) for raw in data["profiles"]]
    logger.debug("Loaded %d profiles from %s", len(profiles), source)
    return profiles


def list_profiles() -> List[EnvironmentProfile]:
    """Return the bundled profiles (development, staging, production)."""
    return load_profiles()


def get_profile(name: str) -> EnvironmentProfile:
    """Look up a bundled profile by name or alias (case-insensitive).

    Raises:
        UnknownEnvironmentError: If nothing matches
    """
    profiles = list_profiles()
    for profile in profiles:
        if profile.matches(name):
            return profile
    raise UnknownEnvironmentError(name, [p.name for p in profiles])
