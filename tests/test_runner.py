"""Tests for the build/run harness and folder opener."""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from utilhub.runner import DotnetHarness, open_folder


class TestDotnetHarness:
    """Test DotnetHarness commands."""

    def test_build_command(self) -> None:
        harness = DotnetHarness()

        assert harness.build_command(Path("/u/tool.csx")) == [
            "dotnet", "build", "--file", str(Path("/u/tool.csx")), "-v:q",
        ]

    def test_run_command(self) -> None:
        harness = DotnetHarness("/opt/dotnet/dotnet")

        assert harness.run_command(Path("tool.csx")) == [
            "/opt/dotnet/dotnet", "run", "--no-build", "--file", "tool.csx",
        ]

    @patch("utilhub.runner.subprocess.run")
    def test_build_captures_output(self, mock_run: MagicMock) -> None:
        """Build output is captured and only the exit code is returned."""
        mock_run.return_value = subprocess.CompletedProcess([], 0, stdout="ok", stderr="")

        assert DotnetHarness().build(Path("tool.csx")) == 0
        assert mock_run.call_args.kwargs["capture_output"] is True

    @patch("utilhub.runner.subprocess.run")
    def test_build_failure_code(self, mock_run: MagicMock) -> None:
        mock_run.return_value = subprocess.CompletedProcess([], 3, stdout="", stderr="error CS1002")

        assert DotnetHarness().build(Path("tool.csx")) == 3

    @patch("utilhub.runner.subprocess.run")
    def test_run_inherits_output(self, mock_run: MagicMock) -> None:
        """Run output goes straight to the terminal."""
        mock_run.return_value = subprocess.CompletedProcess([], 7)

        assert DotnetHarness().run(Path("tool.csx")) == 7
        assert "capture_output" not in mock_run.call_args.kwargs
        assert "stdout" not in mock_run.call_args.kwargs

    @patch("utilhub.runner.subprocess.run", side_effect=FileNotFoundError("dotnet"))
    def test_missing_toolchain_raises(self, mock_run: MagicMock) -> None:
        with pytest.raises(OSError):
            DotnetHarness().build(Path("tool.csx"))


class TestOpenFolder:
    """Test open_folder function."""

    @patch("utilhub.runner.subprocess.Popen")
    @patch("utilhub.runner.sys.platform", "linux")
    @patch("utilhub.runner.os.name", "posix")
    def test_linux_uses_xdg_open(self, mock_popen: MagicMock) -> None:
        open_folder(Path("/u"))

        mock_popen.assert_called_once_with(["xdg-open", str(Path("/u"))])

    @patch("utilhub.runner.subprocess.Popen")
    @patch("utilhub.runner.sys.platform", "darwin")
    @patch("utilhub.runner.os.name", "posix")
    def test_macos_uses_open(self, mock_popen: MagicMock) -> None:
        open_folder(Path("/u"))

        mock_popen.assert_called_once_with(["open", str(Path("/u"))])

    @patch("utilhub.runner.subprocess.Popen", side_effect=FileNotFoundError("xdg-open"))
    @patch("utilhub.runner.os.name", "posix")
    def test_failure_raises(self, mock_popen: MagicMock) -> None:
        with pytest.raises(OSError):
            open_folder(Path("/u"))
