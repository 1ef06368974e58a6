#!/usr/bin/env python3
"""
Backfill Script
===============
Extracts historical wallet activity one calendar month at a time, then
rebuilds the analytics tables once over the whole history.

Progress is kept in a JSON checkpoint so an interrupted run resumes at the
first month not yet extracted.

Usage:
    python scripts/backfill.py --start 2024-01 --end 2024-12
    python scripts/backfill.py --start 2024-01 --end 2024-12 --dry-run
    python scripts/backfill.py --start 2024-01 --end 2024-12 --reset
"""

import argparse
import json
import re
from calendar import monthrange
from dataclasses import dataclass, field
from pathlib import Path

CHECKPOINT_FILE = Path(__file__).parent / ".backfill_checkpoint.json"

MONTH_PATTERN = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


@dataclass(frozen=True, order=True)
class Month:
    """A calendar month; orders chronologically."""

    year: int
    month: int

    @classmethod
    def from_key(cls, key: str) -> "Month":
        """Parse a YYYY-MM key."""
        year, month = key.split("-")
        return cls(int(year), int(month))

    @property
    def key(self) -> str:
        return f"{self.year}-{self.month:02d}"

    @property
    def start_date(self) -> str:
        return f"{self.key}-01"

    @property
    def end_date(self) -> str:
        return f"{self.key}-{monthrange(self.year, self.month)[1]:02d}"

    def next(self) -> "Month":
        if self.month == 12:
            return Month(self.year + 1, 1)
        return Month(self.year, self.month + 1)


@dataclass
class Checkpoint:
    """Months extracted successfully, and months whose last attempt failed."""

    completed: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)

    def is_done(self, month: str) -> bool:
        return month in self.completed

    def mark_complete(self, month: str) -> None:
        if not self.is_done(month):
            self.completed.append(month)
        self.failed = [m for m in self.failed if m != month]

    def mark_failed(self, month: str) -> None:
        if month not in self.failed:
            self.failed.append(month)

    def to_dict(self) -> dict:
        return {"completed": self.completed, "failed": self.failed}

    @classmethod
    def from_dict(cls, data: dict) -> "Checkpoint":
        return cls(completed=list(data.get("completed", [])), failed=list(data.get("failed", [])))


@dataclass
class BackfillResult:
    """Outcome of extracting one month."""

    month: str
    success: bool
    extracted: int = 0
    error: str | None = None


def generate_months(start: str, end: str) -> list[str]:
    """Month keys from start to end, both inclusive. Empty if end precedes start."""
    current, last = Month.from_key(start), Month.from_key(end)
    keys = []
    while current <= last:
        keys.append(current.key)
        current = current.next()
    return keys


def get_pending_months(all_months: list[str], checkpoint: Checkpoint) -> list[str]:
    return [m for m in all_months if not checkpoint.is_done(m)]


def validate_month_format(value: str) -> bool:
    """True for a YYYY-MM key with a month in 01..12."""
    return bool(MONTH_PATTERN.match(value))


def load_checkpoint(path: Path = CHECKPOINT_FILE) -> Checkpoint:
    if not path.exists():
        return Checkpoint()
    return Checkpoint.from_dict(json.loads(path.read_text()))


def save_checkpoint(checkpoint: Checkpoint, path: Path = CHECKPOINT_FILE) -> None:
    path.write_text(json.dumps(checkpoint.to_dict(), indent=2))


def reset_checkpoint(path: Path = CHECKPOINT_FILE) -> None:
    path.unlink(missing_ok=True)


def process_month(month: Month) -> BackfillResult:
    """Extract one month of wallet activity."""
    from wallet_analytics.flows.extract import extract_flow

    try:
        summary = extract_flow(start_date=month.start_date, end_date=month.end_date)
    except Exception as e:
        return BackfillResult(month=month.key, success=False, error=str(e))

    return BackfillResult(month=month.key, success=True, extracted=sum(summary["counts"].values()))


def run_transform() -> int:
    """Rebuild analytics once over the full backfilled history."""
    from wallet_analytics.flows.transform_analytics import transform_analytics_flow

    return sum(transform_analytics_flow()["counts"].values())


def run_backfill(
    start: str,
    end: str,
    dry_run: bool = False,
    extract_only: bool = False,
    stop_on_error: bool = False,
    checkpoint_path: Path = CHECKPOINT_FILE,
) -> list[BackfillResult]:
    """
    Extract every pending month in [start, end], then rebuild analytics.

    Analytics are whole-history aggregates per wallet, so the transform runs
    once after extraction, and only if at least one month succeeded.

    Returns:
        One result per month attempted (empty for a dry run)
    """
    checkpoint = load_checkpoint(checkpoint_path)
    pending = get_pending_months(generate_months(start, end), checkpoint)

    print(f"\n📅 Backfill {start} → {end}: {len(pending)} pending, {len(checkpoint.completed)} done")

    if not pending:
        print("✅ Nothing to do")
        return []

    if dry_run:
        print("🔍 Dry run, would extract:")
        for month in map(Month.from_key, pending):
            print(f"   {month.key}: {month.start_date} → {month.end_date}")
        return []

    results = []
    for i, month in enumerate(map(Month.from_key, pending), 1):
        print(f"\n[{i}/{len(pending)}] {month.key}")

        result = process_month(month)
        results.append(result)

        if result.success:
            checkpoint.mark_complete(month.key)
            print(f"    ✅ Extracted {result.extracted:,}")
        else:
            checkpoint.mark_failed(month.key)
            print(f"    ❌ {result.error}")
        save_checkpoint(checkpoint, checkpoint_path)

        if not result.success and stop_on_error:
            print("\nStopped on error. Run again to resume.")
            break

    succeeded = sum(1 for r in results if r.success)

    if succeeded and not extract_only:
        print("\n🔨 Rebuilding analytics tables...")
        print(f"    ✅ Transformed {run_transform():,}")

    print(f"\n📊 {succeeded} succeeded, {len(results) - succeeded} failed")
    return results


def month_arg(value: str) -> str:
    if not validate_month_format(value):
        raise argparse.ArgumentTypeError(f"expected YYYY-MM, got {value!r}")
    return value


def main():
    parser = argparse.ArgumentParser(description="Backfill wallet activity for historical months")
    parser.add_argument("--start", required=True, type=month_arg, help="First month (YYYY-MM)")
    parser.add_argument("--end", required=True, type=month_arg, help="Last month (YYYY-MM)")
    parser.add_argument("--dry-run", action="store_true", help="List pending months only")
    parser.add_argument("--extract-only", action="store_true", help="Skip the analytics rebuild")
    parser.add_argument("--stop-on-error", action="store_true", help="Stop at the first failed month")
    parser.add_argument("--reset", action="store_true", help="Discard the checkpoint first")
    args = parser.parse_args()

    if args.reset:
        reset_checkpoint()
        print("✓ Checkpoint reset")

    run_backfill(
        start=args.start,
        end=args.end,
        dry_run=args.dry_run,
        extract_only=args.extract_only,
        stop_on_error=args.stop_on_error,
    )


if __name__ == "__main__":
    main()
