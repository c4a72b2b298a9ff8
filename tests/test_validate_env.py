import asyncio

from orm_demo.db import init_db, make_engine
from scripts.validate_env import EnvironmentValidator, main


def _create_schema(database_url):
    async def create():
        engine = make_engine(database_url)
        try:
            await init_db(engine)
        finally:
            await engine.dispose()

    asyncio.run(create())


class TestEnvironmentValidator:

    def test_pass_with_schema(self, database_url, capsys):
        _create_schema(database_url)
        validator = EnvironmentValidator(database_url)

        assert validator.validate_all() is True
        assert validator.errors == []
        assert any("Schema present" in msg for msg in validator.info)
        assert "Overall: PASS" in capsys.readouterr().out

    def test_fail_without_schema(self, database_url, capsys):
        validator = EnvironmentValidator(database_url)

        assert validator.validate_all() is False
        assert any("Missing tables: users, posts, profiles" in msg for msg in validator.errors)
        assert "Overall: FAIL" in capsys.readouterr().out

    def test_unsupported_url(self):
        validator = EnvironmentValidator("mysql://u:p@localhost/demo")

        assert validator.validate_all() is False
        assert any("unsupported backend" in msg for msg in validator.errors)

    def test_url_rewrite_reported(self, tmp_path):
        url = f"sqlite:///{tmp_path / 'plain.db'}"
        _create_schema(url)
        validator = EnvironmentValidator(url)

        assert validator.validate_all() is True
        assert validator.database_url.startswith("sqlite+aiosqlite:///")
        assert any("rewritten for async driver" in msg for msg in validator.info)

    def test_main_reads_database_url(self, database_url, monkeypatch):
        _create_schema(database_url)
        monkeypatch.setenv("DATABASE_URL", database_url)

        assert main() == 0

    def test_main_fails_for_unreachable_database(self, tmp_path, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'no' / 'such' / 'dir.db'}")

        assert main() == 1
