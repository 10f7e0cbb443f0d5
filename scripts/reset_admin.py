#!/usr/bin/env python3
"""
Reset the admin account on a running API so /api/admin/setup can be used again.

Usage:
    ADMIN_RESET_KEY=... python scripts/reset_admin.py [--url http://localhost:8000]
"""

import argparse
import os
import sys

import requests


def reset_admin(base_url: str, reset_key: str, timeout: float = 10) -> int:
    """Call DELETE /api/admin/reset and return the number of deleted accounts."""
    response = requests.delete(
        f"{base_url.rstrip('/')}/api/admin/reset",
        headers={"x-reset-key": reset_key},
        timeout=timeout,
    )
    response.raise_for_status()
    return response.json()["deletedCount"]


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--url", default=os.getenv("API_URL", "http://localhost:8000"))
    args = parser.parse_args(argv)

    reset_key = os.getenv("ADMIN_RESET_KEY")
    if not reset_key:
        print("ADMIN_RESET_KEY must be set", file=sys.stderr)
        return 2

    try:
        deleted = reset_admin(args.url, reset_key)
    except requests.RequestException as e:
        print(f"✗ Reset failed: {e}", file=sys.stderr)
        return 1

    print(f"✓ Deleted {deleted} admin account(s)")
    print("Create a new admin with POST /api/admin/setup")
    return 0


if __name__ == "__main__":
    sys.exit(main())
