"""
Command-line entry point.

Reads stdin and outputs it in a marquee style. Once a line is read, the
previous marquee stops and the new one starts from the beginning. An empty
line pauses output until more input arrives.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from marquee import __version__
from marquee.config import MarqueeConfig, DEFAULT_SEPARATOR
from marquee.config_manager import ConfigManager
from marquee.controller import MarqueeController
from marquee.exceptions import ConfigError, MarqueeError
from marquee.logging_config import setup_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='marquee',
        description='Read stdin and output it in a marquee style',
        epilog='For use in a pipeline, consider: marquee -l -d 0'
    )
    parser.add_argument('-d', '--delay', type=int, metavar='ms',
                        help='Milliseconds to delay between every print (default: 1000)')
    parser.add_argument('-w', '--width', type=int, metavar='chars',
                        help='Maximum width of the moving content, excluding prefix/suffix (default: 20)')
    parser.add_argument('-l', '--no-loop', dest='loop', action='store_false', default=None,
                        help='Prevent the marquee from looping')
    parser.add_argument('-p', '--prefix', metavar='prefix',
                        help='Prefix to print before every output line')
    parser.add_argument('-f', '--suffix', metavar='suffix',
                        help='Suffix to print after every output line')
    parser.add_argument('-s', '--separator', metavar='sep',
                        help=f'Separator between entries when looping (default: {DEFAULT_SEPARATOR!r})')
    parser.add_argument('-r', '--reverse', action='store_true', default=None,
                        help='Reverse the output (starts at the far right and moves left)')
    parser.add_argument('-L', '--same-line', dest='same_line', action='store_true', default=None,
                        help='Print the output on the same line, using a carriage return')
    parser.add_argument('-j', '--json', action='store_true', default=None,
                        help='Input lines are JSON objects: {"content", "prefix", "suffix", "rotate"}')
    parser.add_argument('-c', '--config', metavar='path',
                        help='JSON config file with a "marquee" section; flags override it')
    parser.add_argument('--debug', action='store_true',
                        help='Enable debug logging on stderr')
    parser.add_argument('--log-format', choices=['readable', 'json'], default='readable',
                        help='Log record format')
    parser.add_argument('--log-file', metavar='path',
                        help='Also write logs to this file')
    parser.add_argument('-V', '--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def load_config(args: argparse.Namespace) -> MarqueeConfig:
    """
    Merge the config file (if any) with command-line flags.

    Raises:
        ConfigError: If the file is invalid or the merged values fail validation
    """
    manager = ConfigManager(args.config)
    manager.load_config()
    config = manager.get_marquee_config().with_overrides(
        delay_ms=args.delay,
        width=args.width,
        loop=args.loop,
        prefix=args.prefix,
        suffix=args.suffix,
        separator=args.separator,
        reverse=args.reverse,
        same_line=args.same_line,
        json=args.json,
    )

    errors = config.validate()
    if errors:
        raise ConfigError("; ".join(errors), config_path=args.config)
    logger.debug("Effective configuration: %s", config.to_dict())
    return config


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    debug_mode = args.debug or os.environ.get('MARQUEE_DEBUG', '').lower() == 'true'
    setup_logging(
        level=logging.DEBUG if debug_mode else logging.WARNING,
        format_type=args.log_format,
        include_location=debug_mode,
        log_file=args.log_file
    )

    try:
        config = load_config(args)
    except ConfigError as e:
        logger.error("Configuration error: %s", e)
        return 1

    controller = MarqueeController(config)
    try:
        controller.run()
    except KeyboardInterrupt:
        controller.stop()
        return 130
    except MarqueeError as e:
        logger.error("Fatal error: %s", e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
