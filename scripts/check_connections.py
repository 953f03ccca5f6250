#!/usr/bin/env python3
"""
Connection Check Script

Run this to verify the configured storage backend is reachable and the
schema exists.
Usage: python scripts/check_connections.py
"""
from placement_portal.core.config import get_settings
from placement_portal.db import display_url, get_engine, test_postgres_connection
from placement_portal.storage import get_storage


def main():
    settings = get_settings()
    print("=" * 50)
    print("PLACEMENT PORTAL - CONNECTION CHECK")
    print("=" * 50)

    print(f"\n[1] Storage backend: {settings.storage_backend}")
    if settings.storage_backend == "sql":
        print(f"    URL: {display_url(settings.sqlalchemy_url)}")
        if test_postgres_connection(get_engine()):
            print("    ✅ Database: CONNECTED")
        else:
            print("    ❌ Database: FAILED")
            return 1

    print("\n[2] Creating schema...")
    storage = get_storage()
    storage.initialize()
    print(f"    ✅ Tables ready, {len(storage.list_jobs())} job(s) posted")

    print("\n" + "=" * 50)
    print("Connection check complete!")
    print("=" * 50)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
