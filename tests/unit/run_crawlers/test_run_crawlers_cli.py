"""Tests for run_crawlers.cli module."""

from unittest.mock import patch

from common.config import parse_config
from common.errors import ConfigError, CrawlRunError
from common.storage import LocalObjectStore
from run_crawlers.cli import main, parse_run_crawlers_args
from run_crawlers.models import RunSummary


class TestParseArgs:
    def test_defaults(self) -> None:
        args = parse_run_crawlers_args([])
        assert args.config is None
        assert args.only is None
        assert args.load_local is False

    def test_flags(self) -> None:
        args = parse_run_crawlers_args(["--config", "local", "--only", "xai-news", "--load-local"])
        assert args.config == "local"
        assert args.only == "xai-news"
        assert args.load_local is True


@patch("run_crawlers.cli.load_dotenv")
class TestMain:
    @patch("run_crawlers.cli.get_object_store")
    @patch("run_crawlers.cli.run_once")
    @patch("run_crawlers.cli.load_config")
    def test_success_exits_zero(self, mock_load, mock_run, mock_store, _mock_dotenv) -> None:
        mock_load.return_value = parse_config({})
        mock_run.return_value = RunSummary()

        assert main(["--only", "hacker-news,xai-news"]) == 0
        assert mock_run.call_args.kwargs["only"] == ["hacker-news", "xai-news"]
        assert mock_run.call_args.kwargs["store"] is mock_store.return_value

    @patch("run_crawlers.cli.get_object_store")
    @patch("run_crawlers.cli.run_once")
    @patch("run_crawlers.cli.load_config")
    def test_failed_run_exits_one(self, mock_load, mock_run, mock_store, _mock_dotenv) -> None:
        mock_load.return_value = parse_config({})
        mock_run.side_effect = CrawlRunError(succeeded=2, failed=1)

        assert main([]) == 1

    @patch("run_crawlers.cli.load_config")
    def test_config_error_exits_one(self, mock_load, _mock_dotenv) -> None:
        mock_load.side_effect = ConfigError("Config file not found")
        assert main(["--config", "missing"]) == 1

    @patch("run_crawlers.cli.run_once")
    @patch("run_crawlers.cli.load_config")
    def test_load_local_uses_local_store(self, mock_load, mock_run, _mock_dotenv, tmp_path) -> None:
        mock_load.return_value = parse_config({"storage": {"local_path": str(tmp_path)}})
        mock_run.return_value = RunSummary()

        assert main(["--load-local"]) == 0
        store = mock_run.call_args.kwargs["store"]
        assert isinstance(store, LocalObjectStore)
        assert store.output_dir == tmp_path
