"""
ygg-keys CLI entry point.

Generate or inspect Yggdrasil node identities.

Usage::

    python -m ygg_keys generate
    python -m ygg_keys generate --json
    python -m ygg_keys inspect --secret <128 hex chars>
    python -m ygg_keys inspect --secret <64 hex chars> --public <64 hex chars>

Options:
    --json       Print the identity as a single JSON object
    --verbose    Enable debug logging
    --no-color   Disable colored logging output
"""

from __future__ import annotations

import argparse
import logging

from ygg_keys import config
from ygg_keys.identity import IdentitySummary, NodeIdentity
from ygg_keys.types import AddressDerivationError, KeyDecodeError

logger = logging.getLogger(__name__)


class ColoredFormatter(logging.Formatter):
    """Logging formatter with ANSI colors for better readability."""

    # ANSI color codes
    GREY = "\x1b[38;5;244m"
    BLUE = "\x1b[38;5;39m"
    GREEN = "\x1b[38;5;40m"
    YELLOW = "\x1b[38;5;220m"
    RED = "\x1b[38;5;196m"
    BOLD_RED = "\x1b[38;5;196;1m"
    CYAN = "\x1b[38;5;51m"
    RESET = "\x1b[0m"

    LEVEL_COLORS = {
        logging.DEBUG: GREY,
        logging.INFO: GREEN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: BOLD_RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors."""
        # Level color, falling back to no color for custom levels
        color = self.LEVEL_COLORS.get(record.levelno, self.RESET)

        # Timestamp in cyan
        timestamp = self.formatTime(record, self.datefmt)
        colored_time = f"{self.CYAN}{timestamp}{self.RESET}"

        # Level name padded before coloring so columns line up
        levelname = f"{color}{record.levelname:8}{self.RESET}"

        # Logger name in blue
        name = f"{self.BLUE}{record.name}{self.RESET}"

        # Message with arguments interpolated
        message = record.getMessage()

        return f"{colored_time} {levelname} {name}: {message}"


def setup_logging(verbose: bool = False, no_color: bool = False) -> None:
    """
    Configure logging with optional colors.

    The root level is always updated. A handler is only installed when the
    root logger has none, so repeated calls do not duplicate output.
    """
    level = logging.DEBUG if verbose else getattr(logging, config.YGG_KEYS_LOG_LEVEL)

    root = logging.getLogger()
    root.setLevel(level)

    # An embedding application or an earlier call already routes records
    if root.handlers:
        return

    # Stream handler on stderr, keeping stdout for the identity itself
    handler = logging.StreamHandler()
    handler.setLevel(level)

    # Colored formatter unless disabled
    if no_color:
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = ColoredFormatter(datefmt="%Y-%m-%d %H:%M:%S")

    handler.setFormatter(formatter)
    root.addHandler(handler)


def render(summary: IdentitySummary, as_json: bool) -> str:
    """
    Format an identity summary for the terminal.

    The plain form has one `name: value` line per field, in the order
    an operator copies them into a node configuration.
    """
    if as_json:
        return summary.model_dump_json(by_alias=True)

    return "\n".join(
        [
            f"secret:   {summary.secret_key.hex()}",
            f"public:   {summary.public_key.hex()}",
            f"strength: {summary.strength}",
            f"address:  {summary.address}",
            f"subnet:   {summary.subnet}",
        ]
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its `generate` and `inspect` commands."""
    parser = argparse.ArgumentParser(
        prog="ygg-keys",
        description="Yggdrasil node identity tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored logging output",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    generate = commands.add_parser("generate", help="Generate a new identity")
    generate.add_argument("--json", action="store_true", help="Print as JSON")

    inspect = commands.add_parser("inspect", help="Show the address of an existing identity")
    inspect.add_argument(
        "--secret",
        required=True,
        help="Secret key hex (64 chars), or secret and public key joined (128 chars)",
    )
    inspect.add_argument(
        "--public",
        default=None,
        help="Public key hex (64 chars); derived from the secret if omitted",
    )
    inspect.add_argument("--json", action="store_true", help="Print as JSON")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    setup_logging(args.verbose, args.no_color)

    try:
        if args.command == "generate":
            identity = NodeIdentity.generate()
            logger.info("Generated identity with strength %d", identity.strength())
        else:
            identity = NodeIdentity.from_hex(args.secret, args.public)
        summary = identity.summary()
    except KeyDecodeError as e:
        logger.error("Could not load identity: %s", e)
        return 1
    except AddressDerivationError as e:
        logger.error("Could not derive address: %s", e)
        return 1

    print(render(summary, args.json))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
