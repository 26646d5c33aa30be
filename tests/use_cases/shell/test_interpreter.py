"""
End-to-end tests driving the ShellInterpreter over a real directory.
"""

import os

from minishell.adapters.console.buffered_console import BufferedOutput, ScriptedLineReader
from minishell.entities.session import Session
from minishell.use_cases.shell.interpreter import HEREDOC_BANNER


def read(directory, name):
    with open(os.path.join(directory, name)) as f:
        return f.read()


class TestShellInterpreter:
    """Test cases for the ShellInterpreter."""

    def test_prompt_shows_directory(self, shell):
        """Test that the prompt is the current directory followed by '$ '."""
        assert shell.interpreter.prompt() == f"{shell.directory}$ "

    def test_blank_line_does_nothing(self, shell):
        """Test that blank lines print nothing and return None."""
        assert shell.interpreter.process_line("   ") is None
        assert shell.output.getvalue() == ""

    def test_pwd(self, shell):
        """Test printing the current directory."""
        assert shell.run("pwd") == f"{shell.directory}\n"

    def test_unknown_command(self, shell):
        """Test the message for an unknown command keeps the typed name."""
        assert shell.run("unknownCommand") == (
            "Unknown command: unknownCommand. Type 'help' for a list of commands.\n"
        )

    def test_command_names_ignore_case(self, shell):
        """Test that 'PWD' runs pwd."""
        assert shell.run("PWD") == f"{shell.directory}\n"

    def test_help_lists_commands(self, shell):
        """Test that help lists usage and description of each command."""
        output = shell.run("help")

        assert output.startswith("Available commands:\n")
        assert "mv <source> <destination> - Moves a file or directory to a new location." in output
        assert "cat > <file_name>" in output

    def test_exit(self, shell):
        """Test that exit prints a farewell and stops the session."""
        assert shell.run("exit") == "Exiting...\n"
        assert shell.session.running is False

    def test_exit_inside_pipeline_stops_later_stages(self, shell):
        """Test that stages after exit never run."""
        output = shell.run("exit | mkdir never")

        assert output == "Exiting...\n"
        assert not os.path.exists(os.path.join(shell.directory, "never"))

    def test_pipe_identity(self, shell):
        """Test that captured text flows through a cat pipeline unchanged."""
        output = shell.run("cat | cat", ["Hello", "World", "exit"])

        assert output.endswith("Hello\nWorld\n")

    def test_mkdir_touch_ls(self, shell):
        """Test creating entries and listing them."""
        shell.run("mkdir d1")
        shell.run("touch z.txt")

        assert shell.run("ls") == "d1\nz.txt\n"
        assert shell.run("ls -r") == "z.txt\nd1\n"

    def test_ls_hides_dot_entries(self, shell):
        """Test that hidden entries need -a."""
        shell.run("touch .hidden visible.md")

        assert shell.run("ls") == "visible.md\n"
        assert shell.run("ls -a") == ".hidden\nvisible.md\n"

    def test_ls_redirect_suppresses_output(self, shell):
        """Test that a redirected listing is written to the file, not printed."""
        shell.run("touch a.txt")

        assert shell.run("ls > out.txt") == ""
        assert read(shell.directory, "out.txt") == "a.txt\n"

    def test_overwrite_then_overwrite(self, shell):
        """Test that '>' replaces earlier content."""
        shell.run("> f.txt A")
        shell.run("> f.txt B")

        assert read(shell.directory, "f.txt") == "B"

    def test_overwrite_then_append(self, shell):
        """Test that '>>' adds to earlier content."""
        shell.run("> f.txt A")
        assert shell.run(">> f.txt B") == "Content appended to f.txt\n"

        assert read(shell.directory, "f.txt") == "AB"

    def test_literal_write_reports_status(self, shell):
        """Test that the literal-content form prints its status line."""
        assert shell.run("> f.txt hello world") == "Content written to f.txt\n"
        assert read(shell.directory, "f.txt") == "hello world"

    def test_pipe_into_append(self, shell):
        """Test that 'ls | >> output.txt' appends the listing."""
        shell.run("touch a.md b.md")

        assert shell.run("ls | >> output.txt") == ""
        assert read(shell.directory, "output.txt") == "a.md\nb.md\n"

    def test_cat_file(self, shell):
        """Test displaying a file written earlier."""
        shell.run("> f.txt hello there")

        assert shell.run("cat f.txt") == "hello there\n"

    def test_cat_missing_file(self, shell):
        """Test displaying a file that does not exist."""
        assert shell.run("cat nope.txt") == "File not found: nope.txt\n"

    def test_cat_redirect_copies_file(self, shell):
        """Test 'cat in.txt > out.txt'."""
        shell.run("> in.txt one")
        shell.run("cat in.txt > out.txt")

        assert read(shell.directory, "out.txt") == "one\n"

    def test_heredoc_writes_captured_lines(self, shell):
        """Test 'cat > file' captures until the sentinel and writes the lines."""
        output = shell.run("cat > notes.txt", ["line one", "line two", "exit"])

        assert output == f"{HEREDOC_BANNER}\nContent written to notes.txt\n"
        assert read(shell.directory, "notes.txt") == "line one\nline two\n"

    def test_heredoc_append(self, shell):
        """Test 'cat >> file' appends captured lines."""
        shell.run("cat > notes.txt", ["first", "exit"])
        shell.run("cat >> notes.txt", ["second", "exit"])

        assert read(shell.directory, "notes.txt") == "first\nsecond\n"

    def test_heredoc_keeps_padded_sentinel(self, shell):
        """Test that '  exit  ' is captured as text rather than ending input."""
        shell.run("cat > n.txt", ["  exit  ", "real", "exit"])

        assert read(shell.directory, "n.txt") == "  exit  \nreal\n"

    def test_cat_copy_keeps_control_characters(self, shell):
        """Test 'cat src > dst' breaks lines only at real line endings."""
        text = "a\x0cb\x1cc\u2028d\n"
        src = os.path.join(shell.directory, "src.c")
        with open(src, "w", encoding="utf-8", newline="") as f:
            f.write(text)

        shell.run("cat src.c > copy.c")

        dst = os.path.join(shell.directory, "copy.c")
        with open(dst, encoding="utf-8", newline="") as f:
            assert f.read() == text

    def test_cat_normalizes_line_endings(self, shell):
        """Test that CRLF and CR line endings are shown as newlines."""
        with open(os.path.join(shell.directory, "dos.txt"), "w", newline="") as f:
            f.write("one\r\ntwo\rthree")

        assert shell.run("cat dos.txt") == "one\ntwo\nthree\n"

    def test_heredoc_without_name(self, shell):
        """Test the usage message for 'cat >' with no file name."""
        assert shell.run("cat >") == "Usage: cat > <file_name>\n"

    def test_missing_redirect_target(self, shell):
        """Test that a redirection without a target is reported."""
        assert shell.run("ls >") == "Missing file name for redirection\n"

    def test_cd_and_back(self, shell):
        """Test entering a directory and going back with '../.'."""
        start = shell.directory
        shell.run("mkdir sub")

        assert shell.run("cd sub") == ""
        assert shell.directory == os.path.join(start, "sub")

        shell.run("cd ../.")
        assert shell.directory == start

    def test_cd_missing_directory(self, shell):
        """Test that cd to a missing directory leaves the session unchanged."""
        start = shell.directory

        assert shell.run("cd nowhere") == "Directory not found: nowhere\n"
        assert shell.directory == start

    def test_cd_diagnostic_survives_redirection(self, shell):
        """Test that cd errors are printed even when redirected."""
        output = shell.run("cd nowhere > out.txt")

        assert output == "Directory not found: nowhere\n"
        assert read(shell.directory, "out.txt") == ""

    def test_rmdir_not_empty(self, shell):
        """Test removing a directory that still has content."""
        shell.run("mkdir d")
        shell.run("touch d/f.txt")

        assert shell.run("rmdir d") == "d Directory is not empty.\n"
        assert os.path.isfile(os.path.join(shell.directory, "d", "f.txt"))
        assert shell.run("rm -r d") == "Removed directory and its contents: d\n"
        assert not os.path.exists(os.path.join(shell.directory, "d"))

    def test_cp_multiple_into_file_rejected(self, shell):
        """Test that copying several sources needs a directory destination."""
        shell.run("touch a.txt b.txt c.txt")

        assert shell.run("cp a.txt b.txt c.txt") == (
            "Destination must be a directory when copying multiple files\n"
        )

    def test_mv_multiple_into_file_rejected(self, shell):
        """Test that moving several sources needs a directory destination."""
        shell.run("touch a.txt b.txt c.txt")

        assert shell.run("mv a.txt b.txt c.txt") == (
            "Destination must be a directory when moving multiple files\n"
        )

    def test_mv_into_directory(self, shell):
        """Test moving several files into a directory."""
        shell.run("touch a.txt b.txt")
        shell.run("mkdir dest")

        output = shell.run("mv a.txt b.txt dest")

        assert output == (
            "Successfully moved a.txt to dest\nSuccessfully moved b.txt to dest\n"
        )
        assert sorted(os.listdir(os.path.join(shell.directory, "dest"))) == [
            "a.txt",
            "b.txt",
        ]

    def test_syntax_error_does_not_stop_session(self, shell):
        """Test that the session keeps running after a rejected line."""
        shell.run("ls >")

        assert shell.session.running is True
        assert shell.run("pwd") == f"{shell.directory}\n"

    def test_run_until_exit(self, dependency_container, empty_directory):
        """Test the loop stops at 'exit' and leaves remaining input unread."""
        output = BufferedOutput()
        reader = ScriptedLineReader(["pwd", "exit", "pwd"])
        interpreter = dependency_container.create_interpreter(
            Session(current_directory=empty_directory), output, reader
        )

        assert interpreter.run() == 0
        assert output.getvalue() == f"{empty_directory}\nExiting...\n"
        assert reader.remaining() == 1

    def test_run_until_end_of_input(self, dependency_container, empty_directory):
        """Test the loop ends quietly when input runs out."""
        output = BufferedOutput()
        session = Session(current_directory=empty_directory)
        interpreter = dependency_container.create_interpreter(
            session, output, ScriptedLineReader(["pwd"])
        )

        assert interpreter.run() == 0
        assert output.getvalue() == f"{empty_directory}\n"
        assert session.running is True
