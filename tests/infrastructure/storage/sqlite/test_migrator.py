"""Unit tests for database migrator."""

from pathlib import Path

import aiosqlite
import pytest

from stockroom.infrastructure.storage.sqlite.migrations.migrator import (
    MIGRATIONS_DIR,
    MigrationInfo,
    discover_migrations,
    get_applied_migrations,
    get_migration_status,
    initialize_database,
)


class TestMigrationInfo:
    """Tests for MigrationInfo dataclass."""

    def test_from_file_parses_filename(self, tmp_path: Path):
        migration_file = tmp_path / "v001_initial_schema.sql"
        migration_file.write_text("-- Test migration\nSELECT 1;")

        info = MigrationInfo.from_file(migration_file)

        assert info.version == "001"
        assert info.name == "initial_schema"
        assert info.path == migration_file
        assert len(info.checksum) == 16  # First 16 chars of SHA-256

    def test_from_file_rejects_bad_name(self, tmp_path: Path):
        bad = tmp_path / "schema.sql"
        bad.write_text("SELECT 1;")
        with pytest.raises(ValueError, match="schema.sql"):
            MigrationInfo.from_file(bad)


class TestDiscoverMigrations:
    def test_bundled_migrations(self):
        versions = [m.version for m in discover_migrations(MIGRATIONS_DIR)]
        assert versions[0] == "001"
        assert versions == sorted(versions)

    def test_skips_invalid_files(self, tmp_path: Path):
        (tmp_path / "v002_second.sql").write_text("SELECT 2;")
        (tmp_path / "v001_first.sql").write_text("SELECT 1;")
        (tmp_path / "vnotes.sql").write_text("SELECT 3;")

        names = [m.name for m in discover_migrations(tmp_path)]

        assert names == ["first", "second"]


class TestInitializeDatabase:
    async def test_creates_schema(self, temp_db_path: Path):
        results = await initialize_database(temp_db_path)

        assert [r.version for r in results] == ["001"]
        assert all(r.success for r in results)

        async with aiosqlite.connect(temp_db_path) as conn:
            cursor = await conn.execute(
                "SELECT name FROM sqlite_master WHERE type = 'table' ORDER BY name"
            )
            tables = {row[0] for row in await cursor.fetchall()}
        assert {"categories", "products", "schema_migrations"} <= tables

    async def test_second_run_applies_nothing(self, temp_db_path: Path):
        await initialize_database(temp_db_path)
        assert await initialize_database(temp_db_path) == []

    async def test_records_applied_versions(self, temp_db_path: Path):
        await initialize_database(temp_db_path)
        async with aiosqlite.connect(temp_db_path) as conn:
            applied = await get_applied_migrations(conn)
        assert "001" in applied

    async def test_failed_migration_stops(self, tmp_path: Path):
        migrations = tmp_path / "migrations"
        migrations.mkdir()
        (migrations / "v001_base.sql").write_text(
            "CREATE TABLE IF NOT EXISTS schema_migrations ("
            "version TEXT PRIMARY KEY, name TEXT NOT NULL, checksum TEXT, "
            "applied_at TEXT, execution_time_ms INTEGER);"
        )
        (migrations / "v002_broken.sql").write_text("CREATE TABLE oops (;")
        (migrations / "v003_never.sql").write_text("SELECT 1;")

        results = await initialize_database(tmp_path / "db.sqlite", migrations)

        assert [r.success for r in results] == [True, False]
        assert results[1].error

    async def test_no_migrations(self, tmp_path: Path):
        empty = tmp_path / "empty"
        empty.mkdir()
        assert await initialize_database(tmp_path / "db.sqlite", empty) == []


class TestMigrationStatus:
    async def test_pending_before_init(self, temp_db_path: Path):
        status = await get_migration_status(temp_db_path)
        assert status["applied"] == []
        assert "001" in status["pending"]

    async def test_applied_after_init(self, temp_db_path: Path):
        await initialize_database(temp_db_path)
        status = await get_migration_status(temp_db_path)
        assert status["applied"] == ["001"]
        assert status["pending"] == []
