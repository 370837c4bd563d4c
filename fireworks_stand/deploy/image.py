"""Docker image reference built from CI environment variables."""

import logging
from dataclasses import dataclass
from typing import Mapping, Optional

from fireworks_stand.core.config import env_value

logger = logging.getLogger(__name__)

APP_NAME = "fireworks-app"
DEFAULT_BUILD_NUMBER = "local"


@dataclass(frozen=True)
class ImageRef:
    """Container image a deployment would use.

    Attributes:
        branch: Source branch name
        build_number: CI build number
        registry: Registry user prefix, empty when images are local

    Example:
        >>> ref = ImageRef(branch="develop", build_number="local", registry="")
        >>> ref.image
        'fireworks-app:develop-local'
    """
    branch: str
    build_number: str
    registry: str = ""

    @property
    def tag(self) -> str:
        return f"{self.branch}-{self.build_number}"

    @property
    def repository(self) -> str:
        if self.registry:
            return f"{self.registry}/{APP_NAME}"
        return APP_NAME

    @property
    def image(self) -> str:
        return f"{self.repository}:{self.tag}"

    @classmethod
    def from_env(
        cls, default_branch: str, env: Optional[Mapping[str, str]] = None
    ) -> "ImageRef":
        """Resolve branch, build number and registry from the environment.

        Args:
            default_branch: Branch used when BRANCH_NAME is unset or empty
            env: Mapping to read from (defaults to os.environ)

        Returns:
            ImageRef for the current build
        """
        ref = cls(
            branch=env_value("BRANCH_NAME", default_branch, env),
            build_number=env_value("BUILD_NUMBER", DEFAULT_BUILD_NUMBER, env),
            registry=env_value("DOCKER_REGISTRY_USR", "", env),
        )
        logger.debug("Resolved image %s", ref.image)
        return ref
