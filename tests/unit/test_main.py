"""Unit tests for the plantcert-api entry point."""

from unittest.mock import patch

from plantcert.__main__ import APP_PATH, main, parse_args


class TestParseArgs:
    def test_defaults(self) -> None:
        args = parse_args([])
        assert (args.host, args.port, args.reload) == ("127.0.0.1", 8000, False)

    def test_overrides(self) -> None:
        args = parse_args(["--host", "0.0.0.0", "--port", "9001", "--reload"])
        assert (args.host, args.port, args.reload) == ("0.0.0.0", 9001, True)


class TestMain:
    def test_serves_registry_app(self) -> None:
        with patch("plantcert.__main__.uvicorn.run") as mock_run:
            assert main(["--port", "8080"]) == 0

        mock_run.assert_called_once_with(
            APP_PATH, host="127.0.0.1", port=8080, reload=False, log_config=None
        )
        assert APP_PATH == "plantcert.api.main:app"
