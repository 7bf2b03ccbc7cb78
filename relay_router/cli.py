"""Relay Router command line.

Reads a challenge, routes from its source to its target over its relays and
prints a report:

    #ALGORITHM: Fewest Hops
    #METRICS: 12345.678 km over 3 hops
    <challenge comments>
    SAT3,SAT11,SAT7

or, when no route exists, the challenge comments followed by "#NO ROUTE".

Run:
    relay-router [--short | --fast] [-v] challenge.txt
    curl -s https://space-fast-track.herokuapp.com/generate | relay-router
"""

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

import requests

from relay_router.challenge.parser import ChallengeDetails, ChallengeFormatError, parse_challenge
from relay_router.challenge.reader import read_challenge
from relay_router.constants import ChallengeConfig, OutputConfig
from relay_router.model.route_result import RouteResult
from relay_router.routing.router import Router, Strategy

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="relay-router",
        description="Route a signal between two ground points over line-of-sight relays around the Earth.",
        epilog=f"Random challenge data: curl -s '{ChallengeConfig.GENERATOR_URL}' | relay-router [options]",
        add_help=False,
    )
    parser.add_argument("-h", "-?", "--help", action="help", help="show this help message and exit")
    parser.add_argument(
        "input",
        nargs="?",
        default=ChallengeConfig.STDIN_MARKER,
        help="challenge file path or http(s) URL, '-' for standard input (default)",
    )
    algorithm = parser.add_mutually_exclusive_group()
    algorithm.add_argument(
        "--short",
        dest="strategy",
        action="store_const",
        const=Strategy.SHORTEST_PATH,
        help="select the shortest path algorithm over the default fewest hops algorithm",
    )
    algorithm.add_argument(
        "--fast",
        dest="strategy",
        action="store_const",
        const=Strategy.FAST,
        help="select the fast algorithm over the default fewest hops algorithm",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log search details")
    parser.set_defaults(strategy=Strategy.FEWEST_HOPS)
    return parser


def format_report(strategy: Strategy, details: ChallengeDetails, result: RouteResult) -> list[str]:
    """Render the report lines for a routing result."""
    if not result.found:
        return [*details.comments, OutputConfig.NO_ROUTE]

    return [
        f"{OutputConfig.ALGORITHM_PREFIX}{strategy.label}",
        OutputConfig.METRICS_TEMPLATE.format(distance=result.distance, hops=result.hops),
        *details.comments,
        OutputConfig.RELAY_SEPARATOR.join(relay.name for relay in result.relays),
    ]


def run(location: str, strategy: Strategy, output: TextIO) -> RouteResult:
    """Read, parse and route one challenge, writing the report to output."""
    details = parse_challenge(read_challenge(location))
    router = Router(relays=details.relays, strategy=strategy)
    result = router.route(source=details.source, target=details.target)

    for line in format_report(strategy=strategy, details=details, result=result):
        print(line, file=output)
    return result


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        run(location=args.input, strategy=args.strategy, output=sys.stdout)
    except (OSError, requests.RequestException) as e:
        logger.error(f"Cannot read challenge from {args.input}: {e}")
        return 1
    except ChallengeFormatError as e:
        logger.error(f"Invalid challenge: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
