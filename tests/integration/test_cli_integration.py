"""
Integration tests for the command line interface
"""

import pytest
from unittest.mock import patch

from frontend_examples.api_client.asms_client import ASMSAPIClient
from frontend_examples.cli import asms_cli


@pytest.fixture
def service_backed_client(client):
    """Patch the CLI so every ASMSAPIClient talks to the in-process app"""
    real_init = ASMSAPIClient.__init__

    def init(self, api_url, timeout=30, **kwargs):
        real_init(self, "http://testserver", timeout=timeout, max_retries=0)
        self.session = client

    with patch.object(ASMSAPIClient, "__init__", init):
        yield


class TestCLI:

    def test_stateless_single_query(self, service_backed_client, capsys):
        exit_code = asms_cli.main(["--stateless", "--query", "What are your hours?"])

        assert exit_code == 0
        assert "Monday to Saturday" in capsys.readouterr().out

    def test_chatbot_requires_login(self, service_backed_client, capsys):
        exit_code = asms_cli.main(["--query", "hello"])

        assert exit_code == 1
        assert "--username" in capsys.readouterr().out

    def test_bad_login(self, service_backed_client, capsys):
        exit_code = asms_cli.main(["-u", "admin", "-p", "wrong", "--query", "hello"])

        assert exit_code == 1
        assert "Login failed" in capsys.readouterr().out

    def test_chatbot_query_then_history(self, service_backed_client, capsys):
        assert asms_cli.main(["-u", "admin", "-p", "admin123", "-q", "hello"]) == 0
        out = capsys.readouterr().out
        assert "Logged in as admin (ADMIN)" in out
        assert "Bot: Hello! How can I assist you" in out

        assert asms_cli.main(["-u", "admin", "-p", "admin123", "--history", "--clear-history"]) == 0
        out = capsys.readouterr().out
        assert "You: hello" in out
        assert "Chat history cleared successfully" in out

        assert asms_cli.main(["-u", "admin", "-p", "admin123", "--history"]) == 0
        assert "No chat history yet." in capsys.readouterr().out

    def test_interactive_session(self, service_backed_client, capsys):
        inputs = iter(["help", "where are you?", "history", "clear", "quit"])

        with patch("builtins.input", lambda prompt="": next(inputs)):
            assert asms_cli.main(["-u", "customer", "-p", "customer123"]) == 0

        out = capsys.readouterr().out
        assert "Book an appointment" in out
        assert "123 Main Street" in out
        assert "You: where are you?" in out
        assert "Chat history cleared successfully" in out
        assert "Goodbye!" in out

    def test_interactive_eof_exits(self, service_backed_client, capsys):
        def raise_eof(prompt=""):
            raise EOFError

        with patch("builtins.input", raise_eof):
            assert asms_cli.main(["--stateless"]) == 0

        assert "Goodbye!" in capsys.readouterr().out


class TestFormatting:

    def test_format_empty_history(self):
        assert asms_cli.format_history([]) == "No chat history yet."
