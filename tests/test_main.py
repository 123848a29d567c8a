"""Tests for the API server entry point."""

from unittest.mock import MagicMock, patch

from src.main import main
from src.utils.config import ApiConfig, AppConfig


class TestMain:
    """Tests for starting the server."""

    @patch("src.main.setup_logging")
    @patch("src.main.uvicorn.run")
    @patch("src.main.load_config")
    def test_runs_with_configured_address(
        self,
        mock_load: MagicMock,
        mock_run: MagicMock,
        mock_logging: MagicMock,
    ) -> None:
        mock_load.return_value = AppConfig(
            api=ApiConfig(host="127.0.0.1", port=9001), log_level="DEBUG"
        )
        main()
        mock_logging.assert_called_once_with("DEBUG")
        _, kwargs = mock_run.call_args
        assert kwargs == {"host": "127.0.0.1", "port": 9001}
