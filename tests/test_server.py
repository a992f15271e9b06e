"""Tests for server module."""

from unittest.mock import patch

from hostenv_mcp import server


class TestMcpToolsRegistration:
    """Tests for MCP tools registration."""

    def test_mcp_tools_registration(self):
        """Проверка, что сервер создан и инструменты доступны."""
        assert server.mcp is not None

        for name in ("resolve_path", "locate_config", "get_host_info", "check_status"):
            assert callable(getattr(server, name))


class TestToolDelegation:
    """Tests that server tools delegate to the implementations."""

    def test_resolve_path_mcp(self):
        """resolve_path передаёт путь в реализацию."""
        mock_result = {"success": True, "path": "/home/alice", "error": None}

        with patch("hostenv_mcp.server.resolve_path_impl", return_value=mock_result) as mock_impl:
            assert server.resolve_path("~") == mock_result

        mock_impl.assert_called_once_with("~")

    def test_locate_config_mcp(self):
        """locate_config возвращает результат реализации."""
        mock_result = {"found": False, "path": None, "candidates": []}

        with patch("hostenv_mcp.server.locate_config_impl", return_value=mock_result):
            assert server.locate_config() == mock_result

    def test_get_host_info_mcp(self):
        """get_host_info возвращает результат реализации."""
        mock_result = {"host_family": "linux", "hostname": "box"}

        with patch("hostenv_mcp.server.get_host_info_impl", return_value=mock_result):
            assert server.get_host_info() == mock_result

    def test_check_status_mcp(self):
        """check_status возвращает результат реализации."""
        mock_result = {"settings_loaded": True}

        with patch("hostenv_mcp.server.check_status_impl", return_value=mock_result):
            assert server.check_status() == mock_result


class TestMain:
    """Tests for main() entry point."""

    def test_main_runs_server(self):
        """main() запускает MCP сервер."""
        with patch.object(server.mcp, "run") as mock_run:
            server.main()

        mock_run.assert_called_once_with()
