"""Main entry point for the logpurge package."""

from loguru import logger

from logpurge.cli import confirm, create_parser
from logpurge.core import ConfigError, load_config
from logpurge.processing import run_pipeline
from logpurge.utils.logging import setup_logger


def main():
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    # Load configuration
    try:
        config = load_config(args.config, args, parser)
    except ConfigError as e:
        parser.error(str(e))

    # Setup logging
    setup_logger(verbose=config.verbose, debug=config.debug, quiet=config.quiet)

    if not config.pattern:
        parser.error('a glob pattern or folder path is required (or set "pattern" in --config)')

    # Print startup banner
    if config.verbose:
        logger.info("=" * 60)
        logger.info("LogPurge - Console Statement Cleaner")
        logger.info("=" * 60)
        logger.info("")
        logger.info("Configuration:")
        logger.info(f"  Pattern: {config.pattern}")
        logger.info(f"  Mode: {config.mode}")
        if config.replace_with:
            logger.info(f"  Replace with: {config.replace_with}")
        if config.ignore:
            logger.info(f"  Ignore: {', '.join(config.ignore)}")
        logger.info(f"  Dry run: {config.dry_run}")
        logger.info(f"  Workers: {config.jobs}")
        logger.info("")

    # Run pipeline
    try:
        run_pipeline(config, ask=confirm)
    except ConfigError as e:
        parser.error(str(e))
    except KeyboardInterrupt:
        logger.warning("")
        logger.warning("⚠️  Processing interrupted by user")
        raise
    except Exception:
        logger.error("")
        logger.error("=" * 60)
        logger.error("✗ An unexpected error occurred")
        logger.error("=" * 60)
        raise


if __name__ == "__main__":
    main()
