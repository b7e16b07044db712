#!/usr/bin/env python3
"""
Simple script to create the records table for the back office.
"""

import sys
from pathlib import Path

# Make the project root importable
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config import get_config  # noqa: E402
from src.infrastructure.database.operations import DatabaseManager  # noqa: E402


def create_tables():
    """Create all database tables"""
    print("🗄️ Creating database tables...")

    config = get_config()
    database = DatabaseManager(config.database_url)
    try:
        database.init_db()
        print("✅ Database tables created successfully!")
        print(f"📊 Database URL: {config.database_url}")
    finally:
        database.dispose()


if __name__ == "__main__":
    create_tables()
