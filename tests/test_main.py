"""Tests for the tooltip_placement CLI and build_tooltip factory."""

from __future__ import annotations

import pytest

from tooltip_placement.config.settings import Settings
from tooltip_placement.core.positioning import TooltipPositioner
from tooltip_placement.main import build_tooltip, main, parse_args
from tooltip_placement.platform.headless import HeadlessSurfaceProvider


class TestBuildTooltip:
    """Tests for the build_tooltip factory."""

    def test_defaults_build_headless_positioner(self) -> None:
        """With no arguments a headless-backed positioner is returned."""
        positioner = build_tooltip()
        assert isinstance(positioner, TooltipPositioner)
        assert isinstance(positioner.provider, HeadlessSurfaceProvider)
        assert positioner.settings == Settings()

    def test_uses_given_provider_and_settings(self) -> None:
        """Explicit arguments are used as given."""
        provider = HeadlessSurfaceProvider(640, 480)
        settings = Settings(placement="top")
        positioner = build_tooltip(provider, settings)
        assert positioner.provider is provider
        assert positioner.settings is settings


class TestParseArgs:
    """Tests for CLI argument parsing."""

    def test_defaults(self) -> None:
        """Defaults match the demo page and stock settings."""
        args = parse_args([])
        assert args.anchor == (1000.0, 500.0, 100.0, 40.0)
        assert args.viewport == (1920, 1080)
        assert args.placement == "bottom"
        assert args.space == 15
        assert args.verbose is False

    def test_custom_values(self) -> None:
        """Comma-separated values are parsed into tuples."""
        args = parse_args(
            ["--anchor", "1,2,3,4", "--overlay", "5,6", "--viewport", "70,80",
             "-p", "left", "-s", "3"]
        )
        assert args.anchor == (1.0, 2.0, 3.0, 4.0)
        assert args.overlay == (5.0, 6.0)
        assert args.viewport == (70, 80)
        assert args.placement == "left"
        assert args.space == 3

    @pytest.mark.parametrize(
        "argv",
        [
            ["--anchor", "1,2,3"],
            ["--overlay", "a,b"],
            ["--viewport", "100"],
            ["--space", "-1"],
            ["--overlay", "-5,10"],
            ["--viewport", "1280.9,720"],
        ],
    )
    def test_bad_values_exit(self, argv: list[str]) -> None:
        """Malformed values make argparse exit with status 2."""
        with pytest.raises(SystemExit) as exc_info:
            parse_args(argv)
        assert exc_info.value.code == 2


class TestMain:
    """End-to-end CLI runs."""

    def test_prints_summary_and_exits_zero(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """A normal run prints the decision and exits 0."""
        with pytest.raises(SystemExit) as exc_info:
            main(
                ["--anchor", "100,100,100,40", "--overlay", "60,20",
                 "--viewport", "1024,768"]
            )
        assert exc_info.value.code == 0
        out = capsys.readouterr().out
        assert "Placement:  bottom" in out
        assert "Point:      (120, 155)" in out
        assert "Flipped:    no" in out
        assert "On screen:  100%" in out

    def test_reports_flip(self, capsys: pytest.CaptureFixture[str]) -> None:
        """A top placement near the edge is reported as flipped."""
        with pytest.raises(SystemExit):
            main(
                ["--anchor", "100,5,100,40", "--overlay", "60,20",
                 "--viewport", "1024,768", "--placement", "top"]
            )
        out = capsys.readouterr().out
        assert "Requested:  top" in out
        assert "Placement:  bottom" in out
        assert "Flipped:    yes" in out
