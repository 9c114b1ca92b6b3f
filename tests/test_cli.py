"""Tests for the lcsubstring command line."""
import pytest
from click.testing import CliRunner

from lcsubstring import SENTINEL, main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def files(tmp_path):
    a = tmp_path / "a.txt"
    b = tmp_path / "b.txt"
    a.write_text("ba\nna   na\n", encoding="utf-8")
    b.write_text("ana nas", encoding="utf-8")
    return str(a), str(b)


class TestMain:
    def test_success(self, runner, files):
        result = runner.invoke(main, list(files))
        assert result.exit_code == 0
        # "ba na na" and "ana nas" share "na na"
        assert "The longest common substring is 5 characters:" in result.output
        assert "'na na'" in result.output
        assert "ms to find the answer." in result.output

    def test_quiet(self, runner, tmp_path):
        a = tmp_path / "a.txt"
        b = tmp_path / "b.txt"
        a.write_text("banana", encoding="utf-8")
        b.write_text("ananas", encoding="utf-8")
        result = runner.invoke(main, ["--quiet", str(a), str(b)])
        assert result.exit_code == 0
        assert result.output == "anana\n"

    def test_truncate(self, runner, tmp_path):
        a = tmp_path / "a.txt"
        b = tmp_path / "b.txt"
        a.write_text("banana", encoding="utf-8")
        b.write_text("ananas", encoding="utf-8")
        result = runner.invoke(main, ["--truncate", "3", str(a), str(b)])
        assert result.exit_code == 0
        assert "is 5 characters:" in result.output
        assert "'ana...'" in result.output

    @pytest.mark.parametrize("method", ["compare", "doubling"])
    def test_methods(self, runner, files, method):
        result = runner.invoke(main, ["--method", method, "--quiet", *files])
        assert result.exit_code == 0
        assert result.output == "na na\n"

    @pytest.mark.parametrize("args", [[], ["only_one.txt"], ["a", "b", "c"]])
    def test_wrong_argument_count(self, runner, args):
        result = runner.invoke(main, args)
        assert result.exit_code == 1
        assert "The two files to be read must be passed as parameters." in result.output

    def test_missing_file(self, runner, files, tmp_path):
        missing = str(tmp_path / "missing.txt")
        result = runner.invoke(main, [files[0], missing])
        assert result.exit_code == 1
        assert f"The file {missing} was not found." in result.output

    def test_undecodable_file(self, runner, tmp_path, files):
        binary = tmp_path / "binary.txt"
        binary.write_bytes(b"\xff\xfe\xfa")
        result = runner.invoke(main, [str(binary), files[1]])
        assert result.exit_code == 1
        assert f"The file {binary} could not be read: " in result.output
        assert "was not found" not in result.output

    def test_sentinel_collision(self, runner, tmp_path, files):
        a = tmp_path / "sentinel.txt"
        a.write_text("x" + SENTINEL + "y", encoding="utf-8")
        result = runner.invoke(main, [str(a), files[1]])
        assert result.exit_code == 1
        assert f"{a}: document A contains the sentinel" in result.output

    def test_other_sentinel(self, runner, tmp_path, files):
        a = tmp_path / "sentinel.txt"
        a.write_text("x" + SENTINEL + "ana", encoding="utf-8")
        result = runner.invoke(main, ["--sentinel", "#", "--quiet", str(a), files[1]])
        assert result.exit_code == 0
        assert result.output == "ana\n"

    def test_bad_sentinel(self, runner, files):
        result = runner.invoke(main, ["--sentinel", "##", *files])
        assert result.exit_code == 2

    def test_empty_file(self, runner, tmp_path, files):
        empty = tmp_path / "empty.txt"
        empty.write_text("", encoding="utf-8")
        result = runner.invoke(main, [str(empty), files[1]])
        assert result.exit_code == 0
        assert "The longest common substring is 0 characters:" in result.output
