#!/usr/bin/env python3
"""
Synthetic CSV generator for split planning benchmarks.

Writes a large comma-separated file where a share of the rows carry quoted
fields with embedded newlines, separators and doubled quotes. Physical line
count therefore differs from logical record count, which is what the split
planner has to get right.
"""

import argparse
import random
import sys

# Large buffer for efficient streaming writes
BUFFER_SIZE = 1024 * 1024  # 1MB

WORDS = ["alpha", "beta", "gamma", "delta", "epsilon", "zeta", "eta", "theta"]


def make_note(rng: random.Random, max_breaks: int) -> str:
    """Build a quoted free-text field, possibly spanning several raw lines."""
    parts = [" ".join(rng.choices(WORDS, k=rng.randint(1, 6)))]
    for _ in range(rng.randint(0, max_breaks)):
        parts.append(" ".join(rng.choices(WORDS, k=rng.randint(1, 6))))
    text = "\n".join(parts)
    if rng.random() < 0.1:
        text += ', said ""someone""'
    return f'"{text}"'


def generate_synthetic_csv(
    output_path: str,
    rows: int,
    multiline_ratio: float,
    max_breaks: int,
    seed: int,
) -> tuple[int, int]:
    """
    Generate the dataset, streaming rows straight to disk.

    Returns:
        Tuple of (logical records written, raw newlines written).
    """
    rng = random.Random(seed)
    raw_newlines = 0

    with open(output_path, "w", encoding="utf-8", newline="", buffering=BUFFER_SIZE) as f:
        f.write("id,name,amount,note\n")
        raw_newlines += 1

        for i in range(rows):
            if rng.random() < multiline_ratio:
                note = make_note(rng, max_breaks)
            else:
                note = rng.choice(WORDS)
            line = f"{i},{rng.choice(WORDS)}_{i},{rng.randint(0, 99999) / 100:.2f},{note}\n"
            f.write(line)
            raw_newlines += line.count("\n")

            # Progress indicator every million rows
            if (i + 1) % 1_000_000 == 0:
                print(f"  Generated {i + 1:,}/{rows:,} rows...", file=sys.stderr)

    return rows + 1, raw_newlines


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Generate a synthetic CSV with quoted multi-line fields.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # ~1M records, 20% of them multi-line
  python generate_synthetic_csv.py --out data/synthetic.csv --rows 1000000

  # Every record spans several raw lines
  python generate_synthetic_csv.py --out data/heavy.csv --multiline-ratio 1.0 --max-breaks 5
""",
    )

    parser.add_argument("--out", required=True, help="Output file path")
    parser.add_argument(
        "--rows",
        type=int,
        default=1_000_000,
        help="Number of data rows, header excluded (default: 1000000)",
    )
    parser.add_argument(
        "--multiline-ratio",
        type=float,
        default=0.2,
        help="Share of rows with a quoted multi-line note (default: 0.2)",
    )
    parser.add_argument(
        "--max-breaks",
        type=int,
        default=3,
        help="Maximum embedded newlines per quoted note (default: 3)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=1,
        help="Random seed for reproducibility (default: 1)",
    )

    args = parser.parse_args()

    if args.rows < 0:
        parser.error("--rows must be non-negative")
    if not 0.0 <= args.multiline_ratio <= 1.0:
        parser.error("--multiline-ratio must be between 0 and 1")
    if args.max_breaks < 0:
        parser.error("--max-breaks must be non-negative")

    print("=" * 60, file=sys.stderr)
    print("Synthetic CSV Generator", file=sys.stderr)
    print("=" * 60, file=sys.stderr)
    print(f"Output: {args.out}", file=sys.stderr)
    print(f"Rows: {args.rows:,}", file=sys.stderr)
    print(f"Multi-line ratio: {args.multiline_ratio}", file=sys.stderr)
    print(f"Max breaks per note: {args.max_breaks}", file=sys.stderr)
    print(f"Seed: {args.seed}", file=sys.stderr)
    print("=" * 60, file=sys.stderr)

    records, raw_newlines = generate_synthetic_csv(
        output_path=args.out,
        rows=args.rows,
        multiline_ratio=args.multiline_ratio,
        max_breaks=args.max_breaks,
        seed=args.seed,
    )

    print("=" * 60, file=sys.stderr)
    print(
        f"Done! Wrote {records:,} records ({raw_newlines:,} raw lines) to {args.out}",
        file=sys.stderr,
    )
    print("=" * 60, file=sys.stderr)


if __name__ == "__main__":
    main()
