"""Tests for the catalog administration CLI."""

from pathlib import Path

import pytest
from pydantic import ValidationError
from typer.testing import CliRunner

from src.bookstore.runtime.config.config_data import ConfigData
from src.bookstore.runtime.context import with_context
from src.cli import app

runner = CliRunner()


@pytest.fixture
def cli_database(tmp_path: Path):
    override = ConfigData()
    override.database.url = f"sqlite:///{tmp_path / 'catalog.db'}"
    with with_context(override):
        yield tmp_path / "catalog.db"


def test_db_init_creates_database(cli_database: Path):
    result = runner.invoke(app, ["db", "init"])

    assert result.exit_code == 0
    assert "Database ready" in result.output
    assert cli_database.is_file()


def test_category_add_then_list(cli_database: Path):
    assert runner.invoke(app, ["db", "init"]).exit_code == 0

    added = runner.invoke(app, ["category", "add", "Poetry"])
    assert added.exit_code == 0
    assert "Created category 'Poetry'" in added.output

    listed = runner.invoke(app, ["category", "list"])
    assert listed.exit_code == 0
    assert "Poetry" in listed.output
    assert "Found 1 categories" in listed.output


def test_category_list_empty(cli_database: Path):
    runner.invoke(app, ["db", "init"])

    result = runner.invoke(app, ["category", "list"])

    assert result.exit_code == 0
    assert "No book categories found" in result.output


def test_category_add_rejects_blank_name(cli_database: Path):
    runner.invoke(app, ["db", "init"])

    result = runner.invoke(app, ["category", "add", ""])

    assert result.exit_code == 1
    assert "Invalid category name" in result.output
    assert not isinstance(result.exception, ValidationError)
