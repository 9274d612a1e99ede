"""Tests for the typer CLI."""

from unittest.mock import MagicMock, patch

from typer.testing import CliRunner

from devicehub.cli import app

runner = CliRunner()


class TestHealthCommand:
    def test_healthy(self):
        resp = MagicMock(status_code=200)
        resp.json.return_value = {
            "status": "healthy", "version": "0.1.0", "uptime": 12.5,
        }
        with patch("httpx.get", return_value=resp):
            result = runner.invoke(app, ["health", "--url", "http://hub"])
        assert result.exit_code == 0
        assert "healthy" in result.output

    def test_unhealthy_exits_nonzero(self):
        resp = MagicMock(status_code=500)
        resp.json.return_value = {"status": "unhealthy", "error": "db down"}
        with patch("httpx.get", return_value=resp):
            result = runner.invoke(app, ["health"])
        assert result.exit_code == 1

    def test_unreachable(self):
        with patch("httpx.get", side_effect=OSError("refused")):
            result = runner.invoke(app, ["health"])
        assert result.exit_code == 1
