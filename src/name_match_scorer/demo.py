import argparse
import json
import logging
import sys


def main(argv=None):
    """CLI demo: compare a submitted name with the name on record and print the result."""
    from .general.utils.load_config import (
        ConfigFileNotFound,
        ConfigParseError,
        ConfigTypeError,
        DataDirNotFound,
    )

    parser = argparse.ArgumentParser(
        prog="nms-demo",
        description="Score how closely two personal names match.",
    )
    parser.add_argument("input_name", help="Submitted name (e.g. 'Mr. J. Smith')")
    parser.add_argument("given_name", help="Name on record (e.g. 'John Smith')")
    parser.add_argument("--debug", action="store_true", help="Trace the cleanup and the rule that fired")

    args = parser.parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="%(name)s: %(message)s")

    try:
        # the honorific vocabulary loads on first import
        from .matching import match_names

        result = match_names(args.input_name, args.given_name, debug=args.debug)
    except (DataDirNotFound, ConfigFileNotFound, ConfigParseError, ConfigTypeError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)
    print(json.dumps(result.as_dict(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
