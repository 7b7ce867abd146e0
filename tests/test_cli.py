"""Tests for recursive_routing.cli — entrypoint, routes and check."""

import pytest

from recursive_routing.cli import main


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_routes_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "--help"])
        assert exc_info.value.code == 0

    def test_check_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["check", "--help"])
        assert exc_info.value.code == 0


class TestCLIMissingArgs:
    def test_routes_missing_root(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes"])
        assert exc_info.value.code == 2

    def test_check_missing_root(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["check"])
        assert exc_info.value.code == 2


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "recursive-routing" in capsys.readouterr().out


class TestRoutesCommand:
    def test_lists_targets(self, make_tree, capsys: pytest.CaptureFixture[str]) -> None:
        root = make_tree({"index.py": None, "users/get.py": None})

        main(["routes", str(root)])

        lines = capsys.readouterr().out.splitlines()
        assert lines[0].split() == ["TARGET", "FILE"]
        assert lines[2].split() == ["/", "index.py"]
        assert lines[3].split()[0] == "/users/get"

    def test_flags(self, make_tree, capsys: pytest.CaptureFixture[str]) -> None:
        root = make_tree({"docs/index.py": None})

        main(["routes", str(root), "--base-path", "/api", "--keep-index", "--keep-extension"])

        out = capsys.readouterr().out
        assert "/api/docs/index.py" in out
        assert "/api/docs/ " in out

    def test_ext(self, make_tree, capsys: pytest.CaptureFixture[str]) -> None:
        root = make_tree({"get.route": "", "post.py": None})

        main(["routes", str(root), "--ext", ".route"])

        out = capsys.readouterr().out
        assert "/get" in out
        assert "/post" not in out

    def test_empty(self, make_tree, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", str(make_tree({"README.md": "hi"}))])

        assert "No routes found." in capsys.readouterr().out

    def test_does_not_import(self, make_tree, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", str(make_tree({"boom.py": "raise RuntimeError\n"}))])

        assert "/boom" in capsys.readouterr().out

    def test_missing_root(self, tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", str(tmp_path / "nope")])
        assert exc_info.value.code == 1
        assert "Routes directory not found" in capsys.readouterr().err


class TestCheckCommand:
    def test_success(self, make_tree, capsys: pytest.CaptureFixture[str]) -> None:
        root = make_tree({"users/index.py": "def get():\n    pass\n\ndef post():\n    pass\n"})

        main(["check", str(root)])

        out = capsys.readouterr().out
        lines = out.splitlines()
        assert lines[0].split() == ["METHOD", "PATH", "HANDLER"]
        assert lines[2].split() == ["GET", "/users/", "get"]
        assert lines[3].split() == ["POST", "/users/", "post"]
        assert "1 route file(s) mounted." in out

    def test_failures_exit_one(self, make_tree, capsys: pytest.CaptureFixture[str]) -> None:
        root = make_tree({"good.py": None, "bad.py": "raise RuntimeError('boom')\n"})

        with pytest.raises(SystemExit) as exc_info:
            main(["check", str(root)])

        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert "/good" in captured.out
        assert "1 route file(s) failed to load" in captured.err
        assert "bad.py" in captured.err

    def test_nothing_registered(self, make_tree, capsys: pytest.CaptureFixture[str]) -> None:
        main(["check", str(make_tree({}))])

        out = capsys.readouterr().out
        assert "No routes registered." in out
        assert "0 route file(s) mounted." in out
