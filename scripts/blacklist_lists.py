#!/usr/bin/env python3
"""
Blacklist Lists - Maintains the DNSBL host name files.

Reads the master blacklist file (blacklists.txt), checks which DNSBLs are
still alive and rebuilds blacklistsAlive.txt from the result. The alive file
is replaced atomically, so checkers reading it never see a partial list.

Commands:
    show            Print the master list (or the alive list with --alive)
    rebuild-alive   Check every master list DNSBL and rewrite the alive list
    delete-alive    Remove the alive list

Environment Variables:
    DNSBL_LISTS_PATH            Directory holding blacklists.txt (default: auto-detect)
    DNSBL_LISTS_CANDIDATES      Comma-separated directories probed for auto-detection
    DNSBL_LISTS_FILE            Master list file name (default: blacklists.txt)
    DNSBL_LIVENESS_TIMEOUT      DNS timeout per query in seconds (default: 5)
    DNSBL_LIVENESS_WORKERS      Parallel liveness checks (default: 20)
    DNSBL_DNS_SERVER            Custom DNS server IP (default: system resolver)

Usage:
    blacklist_lists.py [--path DIR] [-v] {show,rebuild-alive,delete-alive}
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

# Add scripts directory to path
sys.path.insert(0, str(Path(__file__).parent))

from dnsbl_lists import BlacklistStore, LivenessChecker, StoreConfig, StoreError


def setup_logging(verbose: bool = False) -> None:
    """Configure logging"""
    level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )


def cmd_show(
    store: BlacklistStore, config: StoreConfig, args: argparse.Namespace
) -> int:
    host_names = store.load_alive() if args.alive else store.load()
    for host_name in host_names:
        print(host_name)
    return 0


def cmd_rebuild_alive(
    store: BlacklistStore, config: StoreConfig, args: argparse.Namespace
) -> int:
    logger = logging.getLogger(__name__)

    store.load()
    host_names = store.get_host_names()
    logger.info(f"Checking {len(host_names)} blacklists...")

    checker = LivenessChecker(
        timeout=config.liveness_timeout,
        workers=config.liveness_workers,
        dns_server=config.dns_server,
    )
    results = checker.check_all(host_names)

    for r in results:
        if not r.is_responsive:
            logger.warning(f"  - {r.host_name}: not responding {r.error}".rstrip())

    alive_file = store.write_alive_subset(results)
    logger.info(f"Alive blacklists written to {alive_file}")
    return 0


def cmd_delete_alive(
    store: BlacklistStore, config: StoreConfig, args: argparse.Namespace
) -> int:
    logger = logging.getLogger(__name__)

    if store.delete_alive_subset():
        logger.info("Alive blacklist file deleted")
    else:
        logger.info("No alive blacklist file to delete")
    return 0


COMMANDS = {
    "show": cmd_show,
    "rebuild-alive": cmd_rebuild_alive,
    "delete-alive": cmd_delete_alive,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="DNSBL host name list maintenance")

    parser.add_argument(
        "--path",
        type=str,
        default="",
        help="Directory holding blacklists.txt (default: auto-detect)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    show = subparsers.add_parser("show", help="Print the blacklist host names")
    show.add_argument(
        "--alive",
        action="store_true",
        help="Print the alive list instead of the master list",
    )
    subparsers.add_parser(
        "rebuild-alive", help="Check DNSBLs and rewrite the alive list"
    )
    subparsers.add_parser("delete-alive", help="Delete the alive list")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    config = StoreConfig.from_env()
    if args.path:
        config.path = args.path

    store = BlacklistStore.from_config(config)

    try:
        return COMMANDS[args.command](store, config, args)
    except StoreError as e:
        logger.error(f"{args.command} failed ({e.kind.value}): {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
