"""Stopwatch -- tenths, seconds, minutes and hours chained together.

Demonstrates:
- Building a dial from limits, smallest unit first
- One ChainedTick round per tenth of a second
- Carrying into larger units when a smaller one wraps

Run: python -m examples.stopwatch --rounds 125
"""

import argparse
import time

from tick_chain import Dial

TENTHS_PER_SECOND = 10


def main() -> None:
    parser = argparse.ArgumentParser(description="Terminal stopwatch")
    parser.add_argument(
        "--rounds", type=int, default=125,
        help="Number of tenths to count (default: 125)",
    )
    parser.add_argument(
        "--realtime", action="store_true",
        help="Sleep a tenth of a second between rounds",
    )
    args = parser.parse_args()

    print("=== Stopwatch ===\n")

    # tenths, seconds, minutes, hours
    dial = Dial.from_limits(TENTHS_PER_SECOND, 60, 60, 24)

    for _ in range(args.rounds):
        dial.step()
        hours, minutes, seconds, tenths = dial.text().split(":")
        print(f"\r  {hours}:{minutes}:{seconds}.{tenths}", end="", flush=True)
        if args.realtime:
            time.sleep(1.0 / TENTHS_PER_SECOND)

    print(f"\n\nDone after {dial.rounds} rounds.")


if __name__ == "__main__":
    main()
