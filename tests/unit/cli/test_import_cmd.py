import pytest
from typer.testing import CliRunner

from lifelog import __version__
from lifelog.cli.cli import app
from lifelog.cli.commands import entries as entries_cmd
from tests.lib import create_empty_database, create_legacy_database

runner = CliRunner()


@pytest.fixture
def store_url(tmp_path):
    return f"sqlite:///{tmp_path / 'store.db'}"


@pytest.fixture
def legacy_path(tmp_path):
    return create_legacy_database(
        tmp_path / "legacy.db",
        rows=[
            (1, "Great hike today", 1718840400, None, None, "happy", "exercise"),
            (2, "Quiet evening", 1718926800, None, None, "fine", "tv"),
        ],
    )


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_import_run_reports_summary(legacy_path, store_url):
    result = runner.invoke(app, ["import", "run", str(legacy_path), "--database-url", store_url])

    assert result.exit_code == 0, result.output
    assert "Import Results" in result.output
    assert "Successfully imported 2 entries. 0 duplicates skipped." in result.output


def test_import_run_twice_skips_duplicates(legacy_path, store_url):
    runner.invoke(app, ["import", "run", str(legacy_path), "-d", store_url])
    result = runner.invoke(app, ["import", "run", str(legacy_path), "-d", store_url])

    assert result.exit_code == 0, result.output
    assert "Successfully imported 0 entries. 2 duplicates skipped." in result.output


def test_import_run_lists_entry_errors(tmp_path, store_url):
    path = create_legacy_database(
        tmp_path / "legacy.db",
        rows=[(1, "Off the map", 1700000000, 200.0, 10.0, None, None)],
    )

    result = runner.invoke(app, ["import", "run", str(path), "-d", store_url])

    assert result.exit_code == 0, result.output
    assert "Import completed with 1 errors" in result.output
    assert "Entry 1:" in result.output


def test_import_run_fails_without_entries_table(tmp_path, store_url):
    path = create_empty_database(tmp_path / "empty.db")

    result = runner.invoke(app, ["import", "run", str(path), "-d", store_url])

    assert result.exit_code == 1
    assert "Import failed: No entries table found in the database" in result.output


def test_import_run_requires_existing_file(tmp_path, store_url):
    result = runner.invoke(app, ["import", "run", str(tmp_path / "missing.db"), "-d", store_url])

    assert result.exit_code == 2


def test_inspect_shows_entries_table(tmp_path):
    path = create_legacy_database(
        tmp_path / "legacy.db",
        columns=[("id", "INTEGER"), ("entry", "TEXT"), ("weather", "TEXT")],
        rows=[(1, "Sunny walk", "sun")],
        extra_tables=["settings"],
    )

    result = runner.invoke(app, ["import", "inspect", str(path)])

    assert result.exit_code == 0, result.output
    assert "Entries table: diary_entries (1 rows)" in result.output
    assert "content" in result.output
    assert "metadata" in result.output


def test_inspect_without_entries_table(tmp_path):
    path = create_empty_database(tmp_path / "empty.db")

    result = runner.invoke(app, ["import", "inspect", str(path)])

    assert result.exit_code == 1
    assert "No entries table found in the database" in result.output


def test_entries_list_after_import(legacy_path, store_url):
    runner.invoke(app, ["import", "run", str(legacy_path), "-d", store_url])

    result = runner.invoke(app, ["entries", "list", "-d", store_url, "--newest-first", "-n", "1"])

    assert result.exit_code == 0, result.output
    assert "Journal Entries (1 of 2)" in result.output
    assert "Quiet evening" in result.output
    assert "Great hike today" not in result.output


def test_entries_list_rejects_non_positive_limit(store_url):
    result = runner.invoke(app, ["entries", "list", "-d", store_url, "--limit", "0"])

    assert result.exit_code == 2


def test_preview_truncates_long_first_line():
    preview = entries_cmd._preview("x" * 80 + "\nsecond line")

    assert len(preview) == entries_cmd.PREVIEW_LENGTH
    assert preview.endswith("…")
