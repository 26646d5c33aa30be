"""
Tests for the command-line entry point.
"""

import io
import os

from minishell.cli import main


class TestCli:
    """Test cases for the minishell command."""

    def test_single_command(self, temp_directory, capsys):
        """Test running one line non-interactively."""
        assert main(["-d", temp_directory, "-c", "pwd"]) == 0

        assert capsys.readouterr().out == f"{temp_directory}\n"

    def test_commands_share_session(self, temp_directory, capsys):
        """Test that several -c lines run in one session."""
        assert main(["-d", temp_directory, "-c", "cd subdir", "-c", "ls"]) == 0

        assert capsys.readouterr().out == "test3.md\n"

    def test_exit_stops_remaining_commands(self, empty_directory, capsys):
        """Test that lines after exit are not run."""
        main(["-d", empty_directory, "-c", "exit", "-c", "mkdir late"])

        assert capsys.readouterr().out == "Exiting...\n"
        assert not os.path.exists(os.path.join(empty_directory, "late"))

    def test_capture_reads_stdin(self, empty_directory, monkeypatch, capsys):
        """Test that heredoc capture reads lines from standard input."""
        monkeypatch.setattr("sys.stdin", io.StringIO("from stdin\nexit\n"))

        main(["-d", empty_directory, "-c", "cat > in.txt"])

        with open(os.path.join(empty_directory, "in.txt")) as f:
            assert f.read() == "from stdin\n"
        assert capsys.readouterr().out.endswith("Content written to in.txt\n")

    def test_missing_directory(self, temp_directory, capsys):
        """Test that a bad start directory exits with status 2."""
        missing = os.path.join(temp_directory, "missing")

        assert main(["-d", missing, "-c", "pwd"]) == 2
        assert "Error:" in capsys.readouterr().err

    def test_bad_log_level(self, temp_directory, capsys):
        """Test that an unknown log level exits with status 2."""
        assert main(["-d", temp_directory, "--log-level", "chatty", "-c", "pwd"]) == 2
