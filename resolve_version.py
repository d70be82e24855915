#!/usr/bin/env python3
import argparse
import os
import sys
from release_resolver.services.resolve_service import ResolveService
from release_resolver.utils.logging import setup_logger

ROOT_DIR = os.path.dirname(os.path.abspath(__file__))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Resolve an editor version against its GitHub releases")
    parser.add_argument('--installer', required=True, help='Installer name from the installers file (e.g. neovim)')
    parser.add_argument('--version', default='head', help='head, latest, a version like v9.0.1 or a release tag')
    parser.add_argument('--install', action='store_true', help='Download and unpack the selected asset')
    parser.add_argument('--dry-run', action='store_true', help='Resolve only, never download anything')
    args = parser.parse_args(argv)

    logger = setup_logger("ResolveVersion")
    try:
        installers_file = os.environ.get("INSTALLERS_FILE", f"{ROOT_DIR}/installers.yaml")
        settings_file = os.environ.get("RESOLVER_SETTINGS_FILE")
        logger.info(f"Resolving {args.installer} {args.version} with installers file: {installers_file}")
        service = ResolveService(
            installers_file, settings_file, args.installer, args.version,
            install=args.install, dry_run=args.dry_run,
        )
        service.run()
        logger.info("Version resolution completed successfully")
        return 0
    except Exception as e:
        logger.error(f"Version resolution failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
