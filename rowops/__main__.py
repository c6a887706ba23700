import argparse
import logging

from .session import Session


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="rowops",
        description="Apply elementary row operations to a matrix of exact rationals.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level for diagnostics written to stderr (default: WARNING)",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )
    Session().run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
