"""
Check that every topic in the question bank loads.

Builds each topic's questions through the same path the trainer uses and
prints how many questions exist per kind and difficulty.

Usage:
    # Check the configured source (CATALOG_SOURCE)
    python -m scripts.maintenance.check_catalog

    # Check MongoDB explicitly
    python -m scripts.maintenance.check_catalog --source mongo
"""

import argparse
import sys

import pandas as pd

from core import catalog_repo
from core.errors import QuestionError


def collect_rows(source: str) -> tuple[list[dict], list[str]]:
    rows = []
    failures = []
    for name, title in catalog_repo.list_topics(source):
        try:
            questions = catalog_repo.load_questions(name, source)
        except QuestionError as e:
            failures.append(f"{name}: {e}")
            continue
        print(f"  ✓ {title}: {len(questions)} questions")
        for question in questions:
            rows.append({
                "topic": name,
                "kind": question.kind.label,
                "difficulty": question.difficulty.label,
            })
    return rows, failures


def main():
    parser = argparse.ArgumentParser(description="Validate the question bank")
    parser.add_argument(
        "--source",
        choices=["file", "mongo"],
        help="Catalog source (default: CATALOG_SOURCE or file)"
    )
    args = parser.parse_args()

    source = args.source or catalog_repo.get_catalog_source()
    print(f"Checking question bank ({source})...\n")

    rows, failures = collect_rows(source)

    if rows:
        df = pd.DataFrame(rows)
        table = pd.crosstab(df["kind"], df["difficulty"], margins=True, margins_name="Total")
        print()
        print(table.to_string())

    if failures:
        print(f"\n✗ {len(failures)} topic(s) failed to load:")
        for failure in failures:
            print(f"  {failure}")
        sys.exit(1)

    print("\n✓ All topics loaded")


if __name__ == "__main__":
    main()
