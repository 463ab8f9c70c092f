"""
Issue a grant from the command line (same code path as the API).

Usage:
    python -m scripts.issue_grant languages/en.json
    python -m scripts.issue_grant data/fr.json --route countries
"""
import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from src.api.dependencies import build_container
from src.config.settings import get_settings
from src.core.errors import GrantServiceError


def main():
    parser = argparse.ArgumentParser(description="Issue a short-lived signed grant")
    parser.add_argument("key", help="Resource key (e.g. languages/en.json)")
    parser.add_argument("--route", default="languages", choices=["languages", "countries"])
    args = parser.parse_args()

    try:
        container = build_container(get_settings())
        issuer = container.languages_issuer if args.route == "languages" else container.countries_issuer
        grant = issuer.issue(args.key)
    except GrantServiceError as e:
        print(f"ERROR [{e.code}]: {e.message}", file=sys.stderr)
        return 1

    print(f"  Strategy:   {grant.strategy.value}")
    print(f"  Key:        {grant.resource_key}")
    print(f"  Issued at:  {grant.issued_at.isoformat()}")
    print(f"  Expires at: {grant.expires_at.isoformat()} ({grant.ttl_seconds}s)")
    print(f"\n{grant.resource_url}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
