"""Tests for routejump.cli._jump — ``route-jump jump`` subcommand."""

import io
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from routejump.cli import main
from routejump.cli._jump import choose_action
from routejump.config import JumpSettings, save_settings
from routejump.errors import (
    AmbiguousRoute,
    MethodNotAllowed,
    NoRouteFound,
    RouteNotNavigable,
)
from routejump.routing import Ambiguous, NoRoute, NotNavigable, Resolved

USERS = "App\\Http\\Controllers\\UserController"


class _TTY(io.StringIO):
    def isatty(self) -> bool:
        return True


def _jump(project: Path, *args: str) -> None:
    main(["jump", *args, "--project", str(project)])


class TestChooseAction:
    def test_no_route(self) -> None:
        with pytest.raises(NoRouteFound):
            choose_action("/x", NoRoute())

    def test_not_navigable(self) -> None:
        with pytest.raises(RouteNotNavigable):
            choose_action("/x", NotNavigable(matches=()))

    def test_resolved(self) -> None:
        assert choose_action("/x", Resolved(action="A@b", methods=("GET",))) == "A@b"

    def test_method_picks(self) -> None:
        amb = Ambiguous(choices={"GET": "A@index", "POST": "A@store"})
        assert choose_action("/x", amb, "post") == "A@store"

    def test_unknown_method(self) -> None:
        amb = Ambiguous(choices={"GET": "A@index", "POST": "A@store"})
        with pytest.raises(MethodNotAllowed) as exc_info:
            choose_action("/x", amb, "DELETE")
        assert exc_info.value.allowed == ("GET", "POST")

    def test_resolved_honours_method(self) -> None:
        resolved = Resolved(action="A@update", methods=("PUT", "PATCH"))
        assert choose_action("/x", resolved, "patch") == "A@update"

    def test_resolved_rejects_other_method(self) -> None:
        resolved = Resolved(action="A@show", methods=("GET",))
        with pytest.raises(MethodNotAllowed) as exc_info:
            choose_action("/x", resolved, "delete")
        assert exc_info.value.method == "DELETE"
        assert exc_info.value.allowed == ("GET",)

    def test_non_interactive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO())
        amb = Ambiguous(choices={"GET": "A@index", "POST": "A@store"})
        with pytest.raises(AmbiguousRoute):
            choose_action("/x", amb)

    def test_prompt_by_number(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.stdin", _TTY())
        monkeypatch.setattr("builtins.input", lambda _prompt: "2")
        amb = Ambiguous(choices={"GET": "A@index", "POST": "A@store"})
        assert choose_action("/x", amb) == "A@store"

    def test_prompt_by_name(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.stdin", _TTY())
        monkeypatch.setattr("builtins.input", lambda _prompt: "get")
        amb = Ambiguous(choices={"GET": "A@index", "POST": "A@store"})
        assert choose_action("/x", amb) == "A@index"

    def test_prompt_invalid_answer(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.stdin", _TTY())
        monkeypatch.setattr("builtins.input", lambda _prompt: "9")
        amb = Ambiguous(choices={"GET": "A@index", "POST": "A@store"})
        with pytest.raises(AmbiguousRoute):
            choose_action("/x", amb)

    def test_prompt_lists_choices(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("sys.stdin", _TTY())
        monkeypatch.setattr("builtins.input", lambda _prompt: "1")
        amb = Ambiguous(choices={"GET": "A@index", "POST": "A@store"})
        choose_action("/users", amb)
        out = capsys.readouterr().out
        assert "Multiple routes match /users" in out
        assert "2) POST  A@store" in out


class TestJump:
    def test_full_url(self, laravel_project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        _jump(laravel_project, "http://localhost:8000/users/42?tab=posts")
        out = capsys.readouterr().out.strip()
        assert out.endswith(f"UserController.php:15:21  {USERS}@show")

    def test_subdomain(self, laravel_project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        _jump(laravel_project, "test-account.localhost/terms/shop-member")
        assert "TermsController@shopMember" in capsys.readouterr().out

    def test_method_option(
        self, laravel_project: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        _jump(laravel_project, "/users", "--method", "POST")
        assert f"UserController.php:11:21  {USERS}@store" in capsys.readouterr().out

    def test_method_not_answered(
        self, laravel_project: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            _jump(laravel_project, "/users/1", "--method", "DELETE")
        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert "UserController@show" not in captured.out
        assert "No route answers DELETE /users/1. Allowed methods: GET" in captured.err

    def test_ambiguous_without_tty(
        self,
        laravel_project: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO())
        with pytest.raises(SystemExit) as exc_info:
            _jump(laravel_project, "/users")
        assert exc_info.value.code == 1
        assert "--method (GET, POST)" in capsys.readouterr().err

    def test_closure(self, laravel_project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            _jump(laravel_project, "http://localhost:8000/")
        assert exc_info.value.code == 1
        assert "closure" in capsys.readouterr().err

    def test_no_route(self, laravel_project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            _jump(laravel_project, "/does/not/exist")
        assert exc_info.value.code == 1
        assert "No matching route found for: /does/not/exist" in capsys.readouterr().err

    def test_missing_controller(
        self, laravel_project: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit):
            _jump(laravel_project, "reports/5")
        assert "Controller file not found: ReportController.php" in capsys.readouterr().err

    def test_malformed_listing(
        self, laravel_project: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (laravel_project / "routes.json").write_text("<html>Whoops</html>")
        with pytest.raises(SystemExit):
            _jump(laravel_project, "/users/1")
        assert "No matching route found" in capsys.readouterr().err

    def test_blank_command(self, laravel_project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        save_settings(laravel_project, JumpSettings(command=""))
        with pytest.raises(SystemExit):
            _jump(laravel_project, "/users/1")
        assert "route-jump config --command" in capsys.readouterr().err

    def test_command_failed(
        self, laravel_project: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (laravel_project / "artisan").write_text("echo 'SQLSTATE[HY000]' >&2\nexit 1\n")
        with pytest.raises(SystemExit):
            _jump(laravel_project, "/users/1")
        err = capsys.readouterr().err
        assert "exit code 1" in err
        assert "sh artisan route:list --json" in err
        assert str(laravel_project) in err
        assert "SQLSTATE[HY000]" in err

    def test_missing_project(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit):
            _jump(tmp_path / "missing", "/users")
        assert "Project directory does not exist" in capsys.readouterr().err

    def test_open(self, laravel_project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        opener = MagicMock(return_value=0)
        monkeypatch.setattr("routejump.cli._jump.open_in_editor", opener)
        _jump(laravel_project, "/users/1", "--open", "--editor", "nano")
        location, editor = opener.call_args.args
        assert location.line == 15
        assert editor == "nano"
