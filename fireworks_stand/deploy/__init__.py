"""Deployment notifiers for the development, staging and production environments.

- ImageRef: image tag and repository derived from CI variables
- EnvironmentProfile: per-environment message set loaded from profiles.yaml
- notify: prints the status lines for a run
"""

from fireworks_stand.deploy.image import APP_NAME, ImageRef
from fireworks_stand.deploy.notifier import build_lines, notify
from fireworks_stand.deploy.profiles import EnvironmentProfile, get_profile, list_profiles

__all__ = [
    "APP_NAME",
    "ImageRef",
    "EnvironmentProfile",
    "get_profile",
    "list_profiles",
    "build_lines",
    "notify",
]
