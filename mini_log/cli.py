"""mini-log CLI: replay a YAML session script into a collector and flush it."""

import logging
import sys

from mini_log.config import Config, load_config
from mini_log.script import ScriptError, build_collector, load_script

logger = logging.getLogger(__name__)


def run(config: Config):
    """Load the script named by config and flush it (or report counts on a dry run)."""
    collector = build_collector(load_script(config.script_path))
    logger.info("Replayed %d entries from %s", len(collector), config.script_path)

    if config.dry_run:
        for kind, count in collector.counts().items():
            print(f"{kind.tag}: {count}")
        return

    # Does not return if the script recorded an error
    collector.flush()


def main(argv=None):
    config = load_config(argv)

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
        stream=sys.stderr,
    )

    try:
        run(config)
    except ScriptError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
