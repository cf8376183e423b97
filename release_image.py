#!/usr/bin/env python3
import argparse
import os
import sys
from image_release.errors import PipelineError
from image_release.repositories import ConfigRepository
from image_release.services.release_service import ReleaseService
from image_release.utils.logging import setup_logger


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Image Release Pipeline")
    parser.add_argument('--dry-run', action='store_true', help='Resolve the version and print the release plan without running docker')
    args = parser.parse_args(argv)
    logger = setup_logger("ImageRelease")
    try:
        config_file = os.environ.get("RELEASE_CONFIG_FILE", "release.yaml")
        config = ConfigRepository(config_file).load(os.environ.get("DOCKER_PASS"))
        logger.info(f"Starting release of {config.repository} with manifest {config.manifest}")
        service = ReleaseService(config, dry_run=args.dry_run)
        service.run()
        logger.info("Release completed successfully")
        return 0
    except PipelineError as e:
        logger.error(f"Release failed [{e.kind}]: {e}")
        return 1
    except Exception as e:
        logger.error(f"Release failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
