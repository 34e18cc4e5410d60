import pytest

from tailspin.cli import Cli, build_parser, completion_script, parse_args


def test_no_arguments_gives_defaults():
    assert parse_args([]) == Cli()


def test_flags_and_path():
    cli = parse_args(["-f", "-e", "-p", "app.log"])
    assert cli.follow is True
    assert cli.start_at_end is True
    assert cli.to_stdout is True
    assert cli.file_or_folder_path == "app.log"


def test_long_flags():
    cli = parse_args(
        [
            "--disable-builtin-keywords",
            "--disable-booleans",
            "--disable-severity",
            "--disable-rest",
            "--suppress-output",
        ]
    )
    assert (
        cli.disable_keyword_builtins,
        cli.disable_booleans,
        cli.disable_severity,
        cli.disable_rest,
        cli.suppress_output,
    ) == (True, True, True, True, True)


def test_values():
    cli = parse_args(["--config-path", "theme.toml", "-c", "echo hi"])
    assert cli.config_path == "theme.toml"
    assert cli.listen_command == "echo hi"


def test_words_are_split_on_commas_and_accumulate():
    cli = parse_args(["--words-red", "a,b", "--words-red", "c", "--words-cyan", "d"])
    assert cli.words_red == ["a", "b", "c"]
    assert cli.words_cyan == ["d"]
    assert cli.words_green == []


def test_listen_command_conflicts_with_follow():
    with pytest.raises(SystemExit) as excinfo:
        parse_args(["--follow", "--listen-command", "ls"])
    assert excinfo.value.code == 2


def test_hidden_options_are_not_in_help():
    text = build_parser().format_help()
    assert "--suppress-output" not in text
    assert "--z-generate-shell-completions" not in text
    assert "--words-red" in text


def test_generate_shell_completions_is_parsed():
    cli = parse_args(["--z-generate-shell-completions", "bash"])
    assert cli.generate_shell_completions == "bash"


@pytest.mark.parametrize("shell", ["bash", "zsh", "fish"])
def test_completion_scripts_list_visible_options(shell):
    script = completion_script(shell)
    assert "tspin" in script
    assert "follow" in script
    assert "listen-command" in script
    assert "suppress-output" not in script


@pytest.mark.parametrize("shell", ["powershell", "elvish", ""])
def test_completion_for_unknown_shell_is_none(shell):
    assert completion_script(shell) is None