"""Countdown -- a mm:ss timer ticking down with change callbacks.

Demonstrates:
- Dial units wired to hands you own (TextHand)
- Counting down, borrowing from minutes when seconds wrap to 59
- on_change callbacks firing only when a hand actually moves

Run: python -m examples.countdown --minutes 2
"""

import argparse

from tick_chain import Dial, TextHand, Unit


def main() -> None:
    parser = argparse.ArgumentParser(description="Terminal countdown")
    parser.add_argument(
        "--minutes", type=int, default=2,
        help="Starting minutes, 1-59 (default: 2)",
    )
    args = parser.parse_args()

    seconds = TextHand("00")
    minutes = TextHand(f"{args.minutes:02d}")

    def on_minute() -> None:
        print(f"  -- minute hand leaves {minutes.text}")

    dial = Dial(
        [Unit(seconds, 60), Unit(minutes, 60, on_minute)],
        direction="down",
    )

    print(f"=== Countdown from {dial.text()} ===\n")

    # Stop on reaching 00:00; one more round would wrap to 59:59.
    remaining = args.minutes * 60
    while remaining:
        dial.step()
        remaining -= 1
        if seconds.text in ("00", "30"):
            print(f"  {dial.text()}")

    print("\nLift off.")


if __name__ == "__main__":
    main()
