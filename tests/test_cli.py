"""
Tests for CLI functionality.

The client is mocked; these tests only check argument handling and output.
"""

from __future__ import annotations

import argparse
import json
from unittest.mock import patch

import pytest

from meteofrance_client.cli import (
    cmd_forecast,
    cmd_info,
    cmd_places,
    cmd_rain,
    create_parser,
    main,
)
from meteofrance_client.errors import HTTPStatusError, TransportError
from meteofrance_client.models import Place, RainResponse

PARIS = Place(lat=48.85, lon=2.35, name="Paris", country="FR", dept="75")


class TestCreateParser:
    """Tests for create_parser function."""

    def test_creates_parser(self) -> None:
        """Parser is created successfully."""
        parser = create_parser()
        assert isinstance(parser, argparse.ArgumentParser)
        assert parser.prog == "meteofrance"

    def test_parser_has_version(self) -> None:
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(["--version"])

    def test_parser_has_debug_flag(self) -> None:
        parser = create_parser()
        args = parser.parse_args(["--debug", "info"])
        assert args.debug is True

    def test_forecast_command(self) -> None:
        parser = create_parser()
        args = parser.parse_args(["forecast", "48.85", "2.35", "--lang", "en"])
        assert args.command == "forecast"
        assert args.lat == 48.85
        assert args.lon == 2.35
        assert args.lang == "en"

    def test_negative_longitude(self) -> None:
        """Negative numbers are read as positionals, not options."""
        parser = create_parser()
        args = parser.parse_args(["rain", "48.47", "-5.10"])
        assert args.lon == -5.10

    def test_lang_defaults_to_none(self) -> None:
        parser = create_parser()
        args = parser.parse_args(["forecast-v2", "48.85", "2.35"])
        assert args.lang is None

    def test_invalid_lang_rejected(self) -> None:
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(["rain", "48.85", "2.35", "--lang", "de"])

    def test_places_command(self) -> None:
        parser = create_parser()
        args = parser.parse_args(["places", "Le Havre", "--lat", "49.5"])
        assert args.query == "Le Havre"
        assert args.lat == 49.5
        assert args.lon is None

    def test_token_option(self) -> None:
        parser = create_parser()
        args = parser.parse_args(["--token", "abc", "info"])
        assert args.token == "abc"


class TestCommands:
    def test_places_prints_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        args = argparse.Namespace(token="t", query="Paris", lat=None, lon=None)
        with patch("meteofrance_client.cli.MeteoFranceClient") as mock_client:
            mock_client.return_value.search_places.return_value = [PARIS]
            exit_code = cmd_places(args)
        assert exit_code == 0
        mock_client.assert_called_once_with(token="t")
        mock_client.return_value.search_places.assert_called_once_with("Paris", None, None)
        out = json.loads(capsys.readouterr().out)
        assert out[0]["name"] == "Paris"

    def test_places_empty(self, capsys: pytest.CaptureFixture[str]) -> None:
        args = argparse.Namespace(token=None, query="Nowhere", lat=None, lon=None)
        with patch("meteofrance_client.cli.MeteoFranceClient") as mock_client:
            mock_client.return_value.search_places.return_value = []
            assert cmd_places(args) == 0
        captured = capsys.readouterr()
        assert json.loads(captured.out) == []
        assert "Nowhere" in captured.err

    def test_rain_prints_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        rain = RainResponse(position=PARIS, updated_on=1, quality=0, forecast=())
        args = argparse.Namespace(token=None, lat=48.85, lon=2.35, lang=None)
        with patch("meteofrance_client.cli.MeteoFranceClient") as mock_client:
            mock_client.return_value.get_rain.return_value = rain
            assert cmd_rain(args) == 0
        mock_client.return_value.get_rain.assert_called_once_with(48.85, 2.35, None)
        assert json.loads(capsys.readouterr().out)["position"]["name"] == "Paris"

    def test_forecast_passes_lang(self) -> None:
        args = argparse.Namespace(token=None, lat=48.85, lon=2.35, lang="en")
        with patch("meteofrance_client.cli.MeteoFranceClient") as mock_client:
            mock_client.return_value.get_forecast.return_value.model_dump_json.return_value = "{}"
            assert cmd_forecast(args) == 0
        mock_client.return_value.get_forecast.assert_called_once_with(48.85, 2.35, "en")

    def test_info(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cmd_info(argparse.Namespace()) == 0
        out = capsys.readouterr().out
        assert "meteofrance-client" in out
        assert "Token set: no" in out


class TestMain:
    """Tests for main function."""

    def test_no_command_shows_help(self) -> None:
        assert main([]) == 0

    def test_dispatches_command(self) -> None:
        with patch("meteofrance_client.cli.cmd_info") as mock_cmd:
            mock_cmd.return_value = 0
            assert main(["info"]) == 0
            mock_cmd.assert_called_once()

    def test_api_error_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("meteofrance_client.cli.MeteoFranceClient") as mock_client:
            mock_client.return_value.search_places.side_effect = HTTPStatusError(404, "Not Found")
            assert main(["places", "Paris"]) == 1
        assert "404 Not Found" in capsys.readouterr().err

    def test_transport_error_exits_one(self) -> None:
        with patch("meteofrance_client.cli.MeteoFranceClient") as mock_client:
            mock_client.return_value.get_rain.side_effect = TransportError("timed out")
            assert main(["rain", "48.85", "2.35"]) == 1

    def test_unknown_command_shows_help(self) -> None:
        with patch("meteofrance_client.cli.create_parser") as mock_parser:
            mock_parser.return_value.parse_args.return_value = argparse.Namespace(
                command="unknown", debug=False
            )
            assert main([]) == 1

    def test_debug_configures_logging(self) -> None:
        with (
            patch("meteofrance_client.cli.logging.basicConfig") as mock_config,
            patch("meteofrance_client.cli.cmd_info", return_value=0),
        ):
            main(["--debug", "info"])
        mock_config.assert_called_once()

    def test_invalid_settings_exit_one(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("METEOFRANCE_LANG", "de")
        assert main(["info"]) == 1
        assert "invalid settings" in capsys.readouterr().err
