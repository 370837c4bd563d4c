"""Deployment notifier.

Reports what a deployment to a given environment would do. Nothing is pulled,
started or contacted: the run resolves the image reference from the
environment, prints the profile's status lines and returns 0.
"""

import logging
import sys
from typing import List, Mapping, Optional, TextIO

from fireworks_stand.core.config import env_value
from fireworks_stand.deploy.image import ImageRef
from fireworks_stand.deploy.profiles import EnvironmentProfile

logger = logging.getLogger(__name__)


def build_lines(
    profile: EnvironmentProfile, env: Optional[Mapping[str, str]] = None
) -> List[str]:
    """Build the ordered status lines for one run.

    Args:
        profile: Environment to report on
        env: Mapping to read build variables from (defaults to os.environ)

    Returns:
        Lines without trailing newlines

    Example:
        >>> from fireworks_stand.deploy.profiles import get_profile
        >>> build_lines(get_profile("development"), env={})[1]
        'Deploying image: fireworks-app:develop-local'
    """
    ref = ImageRef.from_env(profile.default_branch, env)

    lines = [
        f"Deploying to {profile.name} environment",
        f"Deploying image: {ref.image}",
    ]
    if profile.show_api_url:
        lines.append(f"API URL: {env_value('NEXT_PUBLIC_API_URL', '', env)}")

    lines.extend(f"{step}..." for step in profile.steps)

    lines.append(f"Deployment to {profile.name} environment completed successfully!")
    lines.append(f"Application is now running at: {profile.url}")
    return lines


def notify(
    profile: EnvironmentProfile,
    env: Optional[Mapping[str, str]] = None,
    stream: Optional[TextIO] = None,
) -> int:
    """Print the status lines for a run and return the exit code (always 0)."""
    if stream is None:
        stream = sys.stdout

    lines = build_lines(profile, env)
    logger.info("Reporting %d status lines for %s", len(lines), profile.name)
    for line in lines:
        stream.write(line + "\n")
    stream.flush()
    return 0
