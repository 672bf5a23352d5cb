"""Tests for the command-line interface."""

from __future__ import annotations

import json
from unittest.mock import MagicMock, patch

from typer.testing import CliRunner

from sendermeta import __version__
from sendermeta.cli.main import app
from tests.pytest_plugins.mock_services import make_city_response

runner = CliRunner()


def patched_reader(response):
    """Patch the geoip2 reader to answer every lookup with response."""
    reader = MagicMock()
    reader.city.return_value = response
    return patch("sendermeta.core.geo.geoip_service.geoip2.database.Reader", return_value=reader)


class TestVersion:
    """Tests for --version."""

    def test_version(self):
        """Version flag prints the version."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output


class TestParseLanguage:
    """Tests for parse-language."""

    def test_ranked_output(self):
        """Languages are printed in rank order."""
        result = runner.invoke(app, ["parse-language", "en-US,es;q=0.1,en;q=0.5"])

        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert lines == ["1. en-us", "2. en", "3. es", "4. en"]

    def test_bracketed_tags_printed_verbatim(self):
        """Tags that look like markup are printed as given."""
        result = runner.invoke(app, ["parse-language", "de,[/b],[bold]x"])

        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert lines == ["1. [bold]x", "2. [/b]", "3. de", "4. en"]


class TestLookup:
    """Tests for lookup."""

    def test_without_database(self):
        """Without a database only ua and addr are reported."""
        result = runner.invoke(app, ["lookup", "192.0.2.1", "--user-agent", "curl/8.5.0", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.output) == {"ua": "curl/8.5.0", "addr": "192.0.2.1"}

    def test_localized_lookup(self, tmp_path):
        """Location names follow --accept-language."""
        database = tmp_path / "city.mmdb"
        database.write_bytes(b"")
        response = make_city_response(
            city={"en": "Munich", "de": "München"},
            country={"en": "Germany", "de": "Deutschland"},
            subdivisions=[{"en": "Bavaria", "de": "Bayern"}],
        )

        with patched_reader(response):
            result = runner.invoke(
                app,
                ["lookup", "192.0.2.1", "-l", "de-AT", "-d", str(database), "--json"],
            )

        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "addr": "192.0.2.1",
            "city": "München",
            "region": "Bayern",
            "country": "Deutschland",
        }

    def test_table_output(self):
        """Default output is a table with absent fields dashed."""
        result = runner.invoke(app, ["lookup", "192.0.2.1"])

        assert result.exit_code == 0
        assert "192.0.2.1" in result.output
        assert "region" in result.output

    def test_table_shows_bracketed_values_verbatim(self):
        """User agents containing markup-like text are not interpreted."""
        user_agent = "Bot [bold]x[/bold] [/i]"
        result = runner.invoke(app, ["lookup", "192.0.2.1", "--user-agent", user_agent])

        assert result.exit_code == 0
        assert user_agent in result.output

    def test_missing_database(self, tmp_path):
        """A missing database is reported as an error."""
        result = runner.invoke(app, ["lookup", "192.0.2.1", "-d", str(tmp_path / "nope.mmdb")])

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_config_file(self, tmp_path):
        """Database path can come from a YAML config."""
        database = tmp_path / "city.mmdb"
        database.write_bytes(b"")
        config = tmp_path / "sendermeta.yaml"
        config.write_text(f"geoip:\n  database_path: {database}\n")
        response = make_city_response(country={"en": "Japan"})

        with patched_reader(response):
            result = runner.invoke(app, ["lookup", "192.0.2.1", "-c", str(config), "--json"])

        assert result.exit_code == 0
        assert json.loads(result.output)["country"] == "Japan"
