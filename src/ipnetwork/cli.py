"""CLI entry point for ipnetwork."""

import argparse
import itertools
import logging
import sys
from typing import Iterable, Iterator

from dotenv import load_dotenv

from ipnetwork import __version__
from ipnetwork.config import Config
from ipnetwork.errors import NetworkError
from ipnetwork.union import IpNetwork

logger = logging.getLogger(__name__)


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return number


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Argument list to parse (defaults to sys.argv[1:]).
    """
    parser = argparse.ArgumentParser(
        prog="ipnetwork",
        description="Inspect and enumerate IPv4/IPv6 CIDR blocks",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    info = commands.add_parser("info", help="Show derived properties of a network")
    info.add_argument("network", help="Network in CIDR notation, e.g. 10.0.0.0/8")

    subnets = commands.add_parser("subnets", help="List the subnets of a network")
    subnets.add_argument("network", help="Network in CIDR notation")
    subnets.add_argument("prefix", type=int, help="Prefix length of the subnets")
    subnets.add_argument(
        "--limit",
        type=_non_negative_int,
        default=None,
        help="Print at most this many subnets (0 for no limit)",
    )

    hosts = commands.add_parser("hosts", help="List the host addresses of a network")
    hosts.add_argument("network", help="Network in CIDR notation")
    hosts.add_argument(
        "--limit",
        type=_non_negative_int,
        default=None,
        help="Print at most this many addresses (0 for no limit)",
    )

    contains = commands.add_parser(
        "contains", help="Check whether an address lies strictly inside a network"
    )
    contains.add_argument("network", help="Network in CIDR notation")
    contains.add_argument("address", help="Address to test")

    return parser.parse_args(argv)


def _limited(items: Iterable, limit: int) -> Iterable:
    if limit == 0:
        return items
    return itertools.islice(items, limit)


def _info(network: IpNetwork, args: argparse.Namespace, config: Config) -> Iterator[str]:
    yield f"family:    IPv{network.version}"
    yield f"network:   {network}"
    yield f"first:     {network.first()}"
    yield f"last:      {network.last()}"
    yield f"netmask:   {network.netmask()}"
    yield f"hostcount: {network.hostcount()}"


def _subnets(network: IpNetwork, args: argparse.Namespace, config: Config) -> Iterator[str]:
    limit = config.max_items if args.limit is None else args.limit
    logger.debug("Splitting %s into /%d subnets (limit %d)", network, args.prefix, limit)
    for subnet in _limited(network.into_subnets(args.prefix), limit):
        yield str(subnet)


def _hosts(network: IpNetwork, args: argparse.Namespace, config: Config) -> Iterator[str]:
    limit = config.max_items if args.limit is None else args.limit
    logger.debug("Listing hosts of %s (limit %d)", network, limit)
    for address in _limited(network.into_hosts(), limit):
        yield str(address)


def _contains(network: IpNetwork, args: argparse.Namespace, config: Config) -> Iterator[str]:
    yield "true" if network.contains(args.address) else "false"


COMMANDS = {
    "info": _info,
    "subnets": _subnets,
    "hosts": _hosts,
    "contains": _contains,
}


def main(argv: list[str] | None = None) -> None:
    """Main entry point for ipnetwork CLI."""
    args = parse_args(argv)

    load_dotenv()

    try:
        config = Config.from_env()
    except ValueError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        sys.exit(1)

    config.setup_logging()
    logger.debug("Config: %s", config)

    try:
        network = IpNetwork.parse(args.network)
        for line in COMMANDS[args.command](network, args, config):
            print(line)
    except NetworkError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
