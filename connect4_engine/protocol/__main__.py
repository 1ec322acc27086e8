"""
Main entry point for running connect4-engine over the text protocol.

Usage:
    python -m connect4_engine.protocol [--algorithm mtdf] [--depth 7]
                                       [--log-file PATH | --no-log] [--quiet]
"""

import argparse

from connect4_engine.config import DEFAULT_LOG_FILE, EngineConfig
from connect4_engine.protocol.interface import ProtocolEngine
from connect4_engine.search.selector import Algorithm


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Run connect4-engine on stdin/stdout")
    parser.add_argument(
        "--algorithm",
        choices=[algorithm.value for algorithm in Algorithm],
        default=Algorithm.ALPHA_BETA.value,
        help="Search algorithm (default: alphabeta)",
    )
    parser.add_argument(
        "--depth", type=int, default=5, help="Default search depth (default: 5)"
    )
    parser.add_argument(
        "--tt-max-size",
        type=int,
        default=None,
        help="Transposition table entry limit (default: unbounded)",
    )
    parser.add_argument(
        "--log-file",
        default=str(DEFAULT_LOG_FILE),
        help=f"Log file path (default: {DEFAULT_LOG_FILE})",
    )
    parser.add_argument("--no-log", action="store_true", help="Disable file logging")
    parser.add_argument("--quiet", action="store_true", help="Log at INFO level instead of DEBUG")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    config = EngineConfig(
        algorithm=args.algorithm,
        depth=args.depth,
        tt_max_size=args.tt_max_size,
        log_file=None if args.no_log else args.log_file,
        debug=not args.quiet,
    )

    engine = ProtocolEngine(config)
    engine.run()


if __name__ == "__main__":
    main()
