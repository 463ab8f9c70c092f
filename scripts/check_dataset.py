"""
Validate a country reference dataset before uploading it.

Usage:
    python -m scripts.check_dataset data/countries.json
"""
import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from src.infrastructure.data import parse_country_dataset


def main():
    parser = argparse.ArgumentParser(description="Check a country dataset file")
    parser.add_argument("path", help="JSON file: list of {code, name, dial_code, flag}")
    parser.add_argument("--show", default="", help="Print the record for this ISO code")
    args = parser.parse_args()

    try:
        parsed = parse_country_dataset(Path(args.path).read_bytes())
    except (OSError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(f"  Countries: {len(parsed)}")
    print(f"  Skipped:   {len(parsed.skipped)}")
    for reason in parsed.skipped:
        print(f"    - {reason}")

    if args.show:
        record = parsed.records.get(args.show.upper())
        print(f"\n{record.to_dict() if record else 'not found'}")

    return 1 if parsed.skipped else 0


if __name__ == "__main__":
    sys.exit(main())
