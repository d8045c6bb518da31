# scripts/setup/init_db.py
"""
Initialize database — drops, recreates and seeds every table.
Run once before first launch, or whenever the demo data should be reset.
Usage: python scripts/setup/init_db.py
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from sqlalchemy import inspect
from app.config import settings
from app.database import pool
from app.services.registry import build_services, initialize_all


def main():
    print("🗄️  Logistics Manager DB Initialization")
    print("=" * 40)
    print(f"📡 Database: {settings.DATABASE_URL}")

    if not pool.ping():
        print("❌ Cannot connect to database")
        print("\nCheck DATABASE_URL in .env and that the server is running.")
        sys.exit(1)
    print("✅ Database connection OK")

    print("\n📋 Rebuilding tables...")
    services = build_services(pool)
    if not initialize_all(services):
        print("❌ Initialization failed — see logs/logistics.log")
        pool.shutdown(settings.DB_SHUTDOWN_GRACE_SECONDS)
        sys.exit(1)

    existing = set(inspect(pool.engine).get_table_names())
    print(f"\n📊 Tables in database ({len(existing)} total):")
    for service in services.values():
        if service.table.name in existing:
            print(f"   ✓ {service.table.name:<20} {service.count()} row(s)")
        else:
            print(f"   ✗ {service.table.name:<20} missing")
    for name in sorted(existing - {s.table.name for s in services.values()}):
        print(f"   · {name:<20} (not managed here)")

    pool.shutdown(settings.DB_SHUTDOWN_GRACE_SECONDS)
    print("\n🎉 Database ready! You can now start the backend:")
    print("   uvicorn app.main:app --host 0.0.0.0 --port 8080 --reload")


if __name__ == "__main__":
    main()
