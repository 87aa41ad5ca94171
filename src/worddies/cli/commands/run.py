"""
Start the chat bot.
"""

import asyncio
import logging
import sys
from dataclasses import replace
from pathlib import Path

from worddies.core.config import configure_logging, load_settings
from worddies.core.errors import ConfigError, ResourceUnavailable
from worddies.runtime import run_bot


logger = logging.getLogger(__name__)


def add_subparser(subparsers):
    parser = subparsers.add_parser("run", help="Connect the bot and start serving")
    parser.add_argument("--corpus", help="Word list path (overrides WORDDIES_CORPUS)")
    parser.set_defaults(func=run)


def run(args):
    try:
        settings = load_settings()
        if args.corpus:
            settings = replace(settings, corpus_path=Path(args.corpus).expanduser().resolve())
        settings.require_token()
    except ConfigError as e:
        print(f"✗ Error: {e}")
        sys.exit(1)

    configure_logging(settings.log_level)

    try:
        asyncio.run(run_bot(settings))
    except ResourceUnavailable as e:
        logger.error("%s", e)
        sys.exit(1)
    except KeyboardInterrupt:
        pass
