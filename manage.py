#!/usr/bin/env python3
"""
Voting engine maintenance commands.

Usage:
    python manage.py init                         # Create tables
    python manage.py load registry.json           # Replace registry data (users, buildings, apartments)
    python manage.py tally 12 --as 1              # Tally proposal 12 acting as user 1
    python manage.py validate                     # Check voting data integrity
"""

import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from app.container import container  # noqa: E402
from app.errors import VotingError  # noqa: E402
from app.repositories.db import get_db  # noqa: E402
from etl import load_registry_file, validate_voting  # noqa: E402
from settings.logging import setup_logging  # noqa: E402

logger = setup_logging(to_file=True)


def run_validation() -> bool:
    """Print an integrity report for the voting tables."""
    result = validate_voting(get_db())

    print("\n" + "=" * 60)
    print("VOTING DATA VALIDATION REPORT")
    print("=" * 60)
    print(f"  Proposals: {result['stats']['proposals']:,}")
    for status, count in result["stats"]["by_status"].items():
        print(f"    {status}: {count:,}")
    print(f"  Votes: {result['stats']['votes']:,}")
    print(f"  Results: {result['stats']['results']:,}")
    for issue in result["issues"]:
        print(f"  ⚠️  {issue}")

    print("=" * 60)
    print("✅ All data valid!" if result["valid"] else "❌ Some issues found.")
    print("=" * 60 + "\n")
    return result["valid"]


def run_tally(args: list[str]) -> bool:
    """Tally one proposal as the given user."""
    if len(args) != 3 or args[1] != "--as" or not args[0].isdigit() or not args[2].isdigit():
        print(__doc__)
        return False

    proposal_id, user_id = int(args[0]), int(args[2])
    container.init()
    caller = container.registry.get_caller(user_id)
    try:
        result = container.tally.tally(proposal_id, caller)
    except VotingError as e:
        logger.error("Tally failed: {}", e.message)
        return False

    print(f"Proposal {proposal_id}: {'PASSED' if result.passed else 'FAILED'}")
    print(f"  Yes: {result.yes_weight}  No: {result.no_weight}  Abstain: {result.abstain_weight}")
    print(f"  Total: {result.total_weight}")
    return True


def main():
    args = sys.argv[1:]
    if not args:
        print(__doc__)
        sys.exit(1)

    command, rest = args[0], args[1:]

    if command == "init":
        get_db()
        logger.info("Database ready")
        return

    if command == "load":
        if len(rest) != 1:
            print(__doc__)
            sys.exit(1)
        load_registry_file(get_db(), rest[0])
        return

    if command == "tally":
        sys.exit(0 if run_tally(rest) else 1)

    if command in ("validate", "--validate"):
        sys.exit(0 if run_validation() else 1)

    print(__doc__)
    sys.exit(1)


if __name__ == "__main__":
    main()
