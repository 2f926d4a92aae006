"""
CLI entry point for conf-papers

Usage:
    # Download every conference listed in conferences.json into papers/
    python -m conf_papers download

    # Other config file and output directory, 5 seconds between downloads
    python -m conf_papers download -f my_confs.json -o ~/papers --delay 5

    # Only NDSS 2017 and 2018 from the config file
    python -m conf_papers download -c NDSS -y 2017 2018

    # Show how many papers are on disk
    python -m conf_papers status

    # Show the conferences and years that have a parser
    python -m conf_papers list
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import (
    DEFAULT_CONFERENCES_FILE,
    DEFAULT_DELAY,
    DEFAULT_OUTPUT_DIR,
    Conference,
    Config,
    load_conferences,
)
from .core import ConferenceCrawler, ensure_dir
from .core.recipe import describe
from .crawlers import RECIPES
from .errors import CrawlerError

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def setup_logging(debug: bool = False, log_file: Optional[str] = None) -> None:
    """
    Configure the root logger

    Args:
        debug: Log at DEBUG level
        log_file: Also write the log to this file
    """
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
    # urllib3 is noisy at DEBUG
    logging.getLogger('urllib3').setLevel(logging.INFO)


def filter_conferences(
    conferences: List[Conference],
    names: Optional[List[str]] = None,
    years: Optional[List[int]] = None,
) -> List[Conference]:
    """Keep the conferences matching the --conference and --years filters"""
    return [
        conf for conf in conferences
        if (not names or conf.name in names) and (not years or conf.year in years)
    ]


def build_config(args) -> Config:
    """
    Build the run configuration from parsed arguments

    Args:
        args: argparse namespace

    Returns:
        Config with the filtered conference list
    """
    conferences = load_conferences(args.config)
    conferences = filter_conferences(conferences, args.conference, args.years)

    return Config(
        delay=args.delay,
        conferences_file=Path(args.config),
        output_dir=Path(args.output_dir),
        conferences=tuple(conferences),
        user_agent=getattr(args, 'user_agent', None),
    )


def cmd_download(args) -> int:
    """Download papers command"""
    config = build_config(args)
    if not config.conferences:
        logger.warning(f"No conferences to crawl in {config.conferences_file}")
        return 0

    ensure_dir(config.output_dir)

    crawler = ConferenceCrawler(config)
    try:
        crawler.crawl(keep_going=args.keep_going)
    finally:
        crawler.session_manager.close()

    return 0


def cmd_status(args) -> int:
    """Show status command"""
    config = build_config(args)

    print("\n" + "=" * 50)
    print(f"Papers in {config.output_dir}")
    print("=" * 50)

    for conf in config.conferences:
        conf_dir = config.output_dir / conf.name / str(conf.year)
        if conf_dir.exists():
            pdf_count = len(list(conf_dir.glob('*.pdf')))
            print(f"  {conf}: {pdf_count} papers")
        else:
            print(f"  {conf}: (not downloaded)")

    print()
    return 0


def cmd_list(args) -> int:
    """List parsers command"""
    for name, table in RECIPES.items():
        print(f"{name}:")
        for years, strategy in describe(table):
            print(f"  {years}: {strategy}")
    return 0


def add_config_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('-f', '--config', default=DEFAULT_CONFERENCES_FILE,
                        help='JSON file listing conferences')
    parser.add_argument('-o', '--output-dir', default=DEFAULT_OUTPUT_DIR,
                        help='Output directory for storing papers')
    parser.add_argument('-c', '--conference', action='append',
                        help='Only this conference name (repeatable)')
    parser.add_argument('-y', '--years', nargs='+', type=int,
                        help='Only these years')


def cli(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(
        prog='conf-papers',
        description='Download conference papers by scraping conference websites',
        epilog='''
Examples:
  # Download everything listed in conferences.json
  %(prog)s download

  # Only USENIX, waiting 5 seconds between downloads
  %(prog)s download -c USENIX --delay 5

  # Check status
  %(prog)s status
        ''',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Download command
    download_parser = subparsers.add_parser('download', help='Download papers')
    add_config_arguments(download_parser)
    download_parser.add_argument('--delay', '--timeout', dest='delay', type=float,
                                 default=DEFAULT_DELAY,
                                 help='Delay between downloads (seconds)')
    download_parser.add_argument('--user-agent', type=str,
                                 help='User-Agent header to send')
    download_parser.add_argument('--keep-going', action='store_true',
                                 help='On a fatal error skip to the next conference')
    download_parser.add_argument('--log-file', type=str,
                                 help='Also write the log to this file')
    download_parser.add_argument('--debug', action='store_true',
                                 help='Enable debug output')

    # Status command
    status_parser = subparsers.add_parser('status', help='Show download status')
    add_config_arguments(status_parser)
    status_parser.set_defaults(delay=DEFAULT_DELAY)

    # List command
    subparsers.add_parser('list', help='Show available parsers')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(getattr(args, 'debug', False), getattr(args, 'log_file', None))

    commands = {
        'download': cmd_download,
        'status': cmd_status,
        'list': cmd_list,
    }

    try:
        return commands[args.command](args)
    except (CrawlerError, OSError) as e:
        # requests.RequestException is an OSError
        logger.error(f"Fatal: {e}")
        if getattr(args, 'debug', False):
            logger.exception("Traceback:")
        return 1


if __name__ == '__main__':
    sys.exit(cli())
