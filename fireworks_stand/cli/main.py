"""fireworks-stand CLI - deployment notifiers and storefront rendering.

Provides the ``fireworks-stand`` command plus the ``deploy-dev``,
``deploy-staging`` and ``deploy-prod`` shortcuts used by CI.
"""

import argparse
import logging
import sys
from typing import List, Optional

from fireworks_stand.core.config import log_level
from fireworks_stand.core.errors import UnknownEnvironmentError
from fireworks_stand.deploy.notifier import notify
from fireworks_stand.deploy.profiles import get_profile, list_profiles
from fireworks_stand.storefront.page import render_page, write_page

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fireworks-stand",
        description="Deployment notifiers and storefront page for Robert's Fireworks Stand",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Report a development deployment
  fireworks-stand deploy development

  # Production, with CI variables
  BRANCH_NAME=main BUILD_NUMBER=42 DOCKER_REGISTRY_USR=robert fireworks-stand deploy prod

  # Render the storefront to a file
  fireworks-stand storefront --out public/index.html

Note:
  BRANCH_NAME, BUILD_NUMBER, DOCKER_REGISTRY_USR and NEXT_PUBLIC_API_URL are
  all optional. Unset or empty values fall back to per-environment defaults.
  FIREWORKS_LOG_LEVEL sets the log level (default: WARNING; -v gives INFO).
"""
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    deploy_parser = subparsers.add_parser(
        "deploy",
        help="Report a deployment to an environment"
    )
    deploy_parser.add_argument(
        "environment",
        help="development, staging or production (aliases: dev, stage, prod)"
    )
    deploy_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    storefront_parser = subparsers.add_parser(
        "storefront",
        help="Render the storefront page"
    )
    storefront_parser.add_argument(
        "--out",
        help="Write the page to this file instead of stdout"
    )
    storefront_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    subparsers.add_parser(
        "environments",
        help="List deployment environments"
    )

    return parser


def _setup_logging(args: argparse.Namespace) -> None:
    if getattr(args, "verbose", False):
        level = logging.INFO
    else:
        level = log_level()
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    _setup_logging(args)

    if args.command == "deploy":
        return cmd_deploy(args)
    elif args.command == "storefront":
        return cmd_storefront(args)
    elif args.command == "environments":
        return cmd_environments(args)
    else:
        parser.print_help()
        return 1


def cmd_deploy(args: argparse.Namespace) -> int:
    """Handle deploy command."""
    try:
        profile = get_profile(args.environment)
    except UnknownEnvironmentError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return notify(profile)


def cmd_storefront(args: argparse.Namespace) -> int:
    """Handle storefront command."""
    if args.out:
        path = write_page(args.out)
        print(f"Wrote storefront page to: {path}")
    else:
        sys.stdout.write(render_page())
    return 0


def cmd_environments(args: argparse.Namespace) -> int:
    for profile in list_profiles():
        print(f"{profile.name:<12} branch={profile.default_branch:<8} {profile.url}")
    return 0


def deploy_dev() -> int:
    return notify(get_profile("development"))


def deploy_staging() -> int:
    return notify(get_profile("staging"))


def deploy_prod() -> int:
    return notify(get_profile("production"))


if __name__ == "__main__":
    sys.exit(main())
