#!/usr/bin/env python3
"""
Category Logger Demo
Exercises every Logger operation against the configured output
"""

import sys
import argparse
from typing import List

from category_logging import (
    AssertionFailure,
    Config,
    Logger,
    OutputSink,
    apply_config,
    set_default_sink,
    set_logging_enabled,
)


def run_demo(logger: Logger, players: List[str], iterations: int = 1000000) -> str:
    """
    Run the demo sequence

    Args:
        logger: Logger to exercise
        players: Player names; an empty list triggers the warning and assertion paths
        iterations: Size of the timed busy loop

    Returns:
        Elapsed time of the busy loop as reported by the timer
    """
    # Log everything
    logger.log("Demo script started!")

    # Conditional logging
    logger.print("This prints only when logging is enabled")

    # Warning example
    if not players:
        logger.warn("No players in the game!")

    # Assertion example
    try:
        first_player = players[0] if players else None
        logger.assert_(first_player is not None, "Expected at least one player!")
    except AssertionFailure as e:
        logger.warn(e)
    else:
        logger.print("Wow, no problems!")

    # Timer example
    logger.start_timer("HeavyTask")
    for i in range(1, iterations + 1):
        _ = i * i
    elapsed = logger.get_timer("HeavyTask")
    logger.log("HeavyTask took:", elapsed)
    return elapsed


def main():
    parser = argparse.ArgumentParser(description='Category Logger Demo')
    parser.add_argument('--category', type=str, default='Demo',
                        help='Logger category (default: Demo)')
    parser.add_argument('--players', nargs='*', default=[],
                        help='Player names present in the demo')
    parser.add_argument('--iterations', type=int, default=1000000,
                        help='Busy loop iterations to time (default: 1000000)')
    parser.add_argument('--disable-logging', action='store_true',
                        help='Turn the global Logging flag off before running')
    parser.add_argument('--env-file', type=str, default=None,
                        help='Path to .env file')

    args = parser.parse_args()

    try:
        config = Config(args.env_file)
    except ValueError as e:
        print(f"❌ Invalid configuration: {e}", file=sys.stderr)
        sys.exit(2)

    set_default_sink(OutputSink(config))
    apply_config(config)
    if args.disable_logging:
        set_logging_enabled(False)

    run_demo(Logger(args.category), args.players, args.iterations)


if __name__ == "__main__":
    main()
