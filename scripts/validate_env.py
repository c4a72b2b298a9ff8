#!/usr/bin/env python3
"""
Validate environment configuration before running the demo.
Checks the database URL, connectivity and that the schema is in place.
Exit code 0 = OK, 1 = problems detected.
"""
import asyncio
import os
import sys
import logging
from typing import List

from sqlalchemy import inspect, text

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

REQUIRED_TABLES = ("users", "posts", "profiles")

class EnvironmentValidator:
    """Validates environment configuration for the ORM demo."""

    def __init__(self, database_url: str = None):
        self.database_url = database_url
        self.errors: List[str] = []
        self.warnings: List[str] = []
        self.info: List[str] = []

    def validate_all(self) -> bool:
        """Run all validation checks."""
        logger.info("Starting environment validation...")

        self.validate_required_variables()
        if self.validate_database_url():
            asyncio.run(self.validate_database_connection())

        self.print_results()
        return len(self.errors) == 0

    def validate_required_variables(self):
        """Check the environment variables the demo reads."""
        if self.database_url is None:
            self.database_url = os.getenv("DATABASE_URL")
        if not self.database_url:
            from orm_demo.config import settings
            self.database_url = settings.database_url
            self.warnings.append(f"DATABASE_URL not set: falling back to {self.database_url}")

    def validate_database_url(self) -> bool:
        """Check the URL maps onto a supported async driver."""
        from orm_demo.config import normalize_database_url
        from orm_demo.exceptions import ConfigurationError

        try:
            normalized = normalize_database_url(self.database_url)
        except ConfigurationError as e:
            self.errors.append(e.message)
            return False
        if normalized != self.database_url:
            self.info.append(f"DATABASE_URL rewritten for async driver: {normalized}")
        self.database_url = normalized
        return True

    async def validate_database_connection(self):
        """Test database connectivity and look for the demo tables."""
        from orm_demo.db import make_engine

        engine = make_engine(self.database_url)
        try:
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
                self.info.append(f"Database connection successful: {engine.dialect.name}")
                tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
        except Exception as e:
            self.errors.append(f"Database connection failed: {str(e)}")
            return
        finally:
            await engine.dispose()

        missing = [t for t in REQUIRED_TABLES if t not in tables]
        if missing:
            self.errors.append(
                f"Missing tables: {', '.join(missing)} (run 'alembic upgrade head' or set CREATE_SCHEMA=true)"
            )
        else:
            self.info.append("Schema present: " + ", ".join(REQUIRED_TABLES))

    def print_results(self):
        print("\n===== Environment Validation Report =====\n")
        if self.info:
            print("Info:")
            for msg in self.info:
                print(f"  - {msg}")
            print("")
        if self.warnings:
            print("Warnings:")
            for msg in self.warnings:
                print(f"  - {msg}")
            print("")
        if self.errors:
            print("Errors:")
            for msg in self.errors:
                print(f"  - {msg}")
            print("")
        overall = "PASS" if not self.errors else "FAIL"
        print(f"Overall: {overall}")
        print("")


def main() -> int:
    validator = EnvironmentValidator()
    ok = validator.validate_all()
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
