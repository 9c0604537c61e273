"""
Tests for application wiring.

Model clients are patched with offline doubles and the terminal is driven
through a patched input().
"""

from unittest.mock import patch

import pytest

from pdfqa.cli.repl import FILENAME_PROMPT, QUESTION_PROMPT
from pdfqa.core.exceptions import ConfigurationError
from pdfqa.main import EXIT_CONFIG_ERROR, EXIT_INTERRUPTED, cli, main


@pytest.fixture(autouse=True)
def isolated_startup(monkeypatch: pytest.MonkeyPatch):
    """No .env loading and no changes to the root logger."""
    for name in ("GOOGLE_API_KEY", "OPENAI_API_KEY", "LLM_PROVIDER", "PIPELINE_SHOW_SOURCES"):
        monkeypatch.delenv(name, raising=False)
    with patch("pdfqa.main.load_dotenv"), patch("pdfqa.main.configure_logging"):
        yield


class TestMain:
    """main() exit codes and session wiring."""

    def test_missing_api_key_is_config_error(self, capsys: pytest.CaptureFixture) -> None:
        """Test a missing API key exits with the configuration error code."""
        assert main() == EXIT_CONFIG_ERROR

        assert "GOOGLE_API_KEY" in capsys.readouterr().err

    def test_invalid_setting_is_config_error(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
    ) -> None:
        """Test an invalid setting exits with the configuration error code."""
        monkeypatch.setenv("PIPELINE_CHUNK_SIZE", "not-a-number")

        assert main() == EXIT_CONFIG_ERROR
        assert "Configuration error" in capsys.readouterr().err

    def test_full_session(self, make_pdf, keyword_embeddings, mock_llm) -> None:
        """Test a full session prompts in order and answers once."""
        path = make_pdf(["Hello PDF"])
        answers = [str(path), "What is this?", "exit"]

        with (
            patch("pdfqa.main.get_embeddings", return_value=keyword_embeddings),
            patch("pdfqa.main.get_chat_model", return_value=mock_llm),
            patch("builtins.input", side_effect=answers) as mock_input,
        ):
            assert main() == 0

        prompts = [call.args[0] for call in mock_input.call_args_list]
        assert prompts == [FILENAME_PROMPT, QUESTION_PROMPT, QUESTION_PROMPT]
        mock_llm.invoke.assert_called_once()

    def test_unreadable_file_exits_with_one(self, tmp_path, keyword_embeddings, mock_llm) -> None:
        """Test an unreadable file exits with code 1 after one prompt."""
        with (
            patch("pdfqa.main.get_embeddings", return_value=keyword_embeddings),
            patch("pdfqa.main.get_chat_model", return_value=mock_llm),
            patch("builtins.input", side_effect=[str(tmp_path / "missing.pdf")]) as mock_input,
        ):
            assert main() == 1

        assert mock_input.call_count == 1

    def test_keyboard_interrupt(self, keyword_embeddings, mock_llm) -> None:
        """Test Ctrl-C exits with code 130."""
        with (
            patch("pdfqa.main.get_embeddings", return_value=keyword_embeddings),
            patch("pdfqa.main.get_chat_model", return_value=mock_llm),
            patch("builtins.input", side_effect=KeyboardInterrupt),
        ):
            assert main() == EXIT_INTERRUPTED

    def test_factory_error_is_config_error(self) -> None:
        """Test client factory errors exit with the configuration error code."""
        with patch(
            "pdfqa.main.get_embeddings",
            side_effect=ConfigurationError("bad provider", setting="LLM_PROVIDER"),
        ):
            assert main() == EXIT_CONFIG_ERROR


class TestCli:
    """Console script wrapper."""

    def test_exits_with_main_code(self) -> None:
        """Test cli() exits with the code returned by main()."""
        with patch("pdfqa.main.main", return_value=EXIT_CONFIG_ERROR):
            with pytest.raises(SystemExit) as exc_info:
                cli()

        assert exc_info.value.code == EXIT_CONFIG_ERROR
