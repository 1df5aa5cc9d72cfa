"""
Tests for the countnoun MCP server module.
"""

import pytest


@pytest.fixture
def server_module(tmp_path, monkeypatch, clean_countnoun_logger):
    # Server import configures file logging under the working directory
    monkeypatch.chdir(tmp_path)
    import countnoun.server as server

    return server


class TestServer:
    def test_has_mcp_instance(self, server_module):
        assert server_module.mcp is not None
        assert server_module.mcp.name == "countnoun"

    def test_exports_tools(self, server_module):
        for name in ("pluralize_word", "singularize_word", "check_forms", "add_rule"):
            assert callable(getattr(server_module, name))

    def test_cli_entry_points(self, server_module):
        assert callable(server_module.cli)
        assert callable(server_module.main)
        assert callable(server_module.main_http)
