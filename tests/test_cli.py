from click.testing import CliRunner
from typer.testing import CliRunner as TyperCliRunner

from opcalc.cmd.main import app
from opcalc.main import main

HOMEWORK = "1 + 2 * 3 + 4 * 5 + 6\n2 * 3 + (4 * 5)\n"


class TestDriver:
    def test_both_parts(self) -> None:
        result = CliRunner().invoke(main, [], input=HOMEWORK)
        assert result.exit_code == 0
        assert "The answer to part 1 is 97\n" in result.output
        assert "The answer to part 2 is 277\n" in result.output

    def test_single_mode(self) -> None:
        result = CliRunner().invoke(main, ["--mode", "precedence"], input=HOMEWORK)
        assert result.exit_code == 0
        assert "The answer to part 2 is 277" in result.output
        assert "part 1" not in result.output

    def test_mode_from_environment(self) -> None:
        result = CliRunner().invoke(
            main, [], input=HOMEWORK, env={"OPCALC_MODE": "flat"}
        )
        assert result.exit_code == 0
        assert "The answer to part 1 is 97" in result.output
        assert "part 2" not in result.output

    def test_reads_file_and_writes_output(self) -> None:
        runner = CliRunner()
        with runner.isolated_filesystem():
            with open("input.txt", "w") as fp:
                fp.write(HOMEWORK)
            result = runner.invoke(main, ["input.txt", "-o", "answers.txt"])
            assert result.exit_code == 0
            with open("answers.txt") as fp:
                assert fp.read() == (
                    "The answer to part 1 is 97\nThe answer to part 2 is 277\n"
                )

    def test_verbose(self) -> None:
        result = CliRunner().invoke(main, ["-v", "-m", "flat"], input=HOMEWORK)
        assert result.exit_code == 0
        assert "The answer to part 1 is 97" in result.output
        assert "line 1:" in result.output
        assert "line 2:" in result.output
        assert "2 lines summed to 97" in result.output

    def test_quiet_by_default(self) -> None:
        result = CliRunner().invoke(main, ["-m", "flat"], input=HOMEWORK)
        assert result.exit_code == 0
        assert "line 1:" not in result.output

    def test_empty_input(self) -> None:
        result = CliRunner().invoke(main, [], input="")
        assert result.exit_code == 0
        assert "The answer to part 1 is 0" in result.output

    def test_evaluation_error(self) -> None:
        result = CliRunner().invoke(main, [], input="1 + 1\n2 * (3\n")
        assert result.exit_code == 1
        assert "line 2:" in result.output
        assert "unclosed parenthesis" in result.output

    def test_invalid_mode(self) -> None:
        result = CliRunner().invoke(main, ["--mode", "sideways"], input=HOMEWORK)
        assert result.exit_code == 2


class TestEval:
    def test_flat(self) -> None:
        result = TyperCliRunner().invoke(app, ["10 * 11 + 12"])
        assert result.exit_code == 0
        assert result.output.strip() == "122"

    def test_precedence(self) -> None:
        result = TyperCliRunner().invoke(app, ["10 * 11 + 12", "--precedence"])
        assert result.exit_code == 0
        assert result.output.strip() == "230"

    def test_error(self) -> None:
        result = TyperCliRunner().invoke(app, ["1 ) 2"])
        assert result.exit_code == 1
        assert "^ ) is not an operation" in result.output
