import io
import logging

import pytest

import egg
from egg import config
from egg.__main__ import main
from egg.interpreter import Interpreter
from egg.repl import Shell, open_parens
from egg.types.errors import EggReferenceError, EggSyntaxError


# ------------------ Interpreter ------------------

def test_module_level_run():
    assert egg.run("+(1, 2)") == 3


def test_run_uses_fresh_program_scope(interp):
    assert interp.run("define(x, 1)") == 1
    with pytest.raises(EggReferenceError, match="x"):
        interp.run("x")
    assert "x" not in interp.globals.vars


def test_eval_keeps_session_definitions(interp):
    interp.eval("define(square, func(n, *(n, n)))")
    assert interp.eval("square(9)") == 81
    # run() does not see the session scope
    with pytest.raises(EggReferenceError):
        interp.run("square(2)")


def test_prelude_defines_globals():
    interp = Interpreter(prelude="define(double, func(n, +(n, n)))")
    assert interp.run("double(21)") == 42
    assert interp.eval("double(1)") == 2


def test_syntax_error_aborts_before_evaluation(interp, capsys):
    with pytest.raises(EggSyntaxError):
        interp.run('print("x") trailing')
    assert capsys.readouterr().out == ""


def test_first_error_aborts_run(capsys):
    with pytest.raises(EggReferenceError):
        egg.run('do(print("before"), missing, print("after"))')
    assert capsys.readouterr().out == "before\n"


def test_debug_logging_of_closures(interp, caplog):
    with caplog.at_level(logging.DEBUG, logger="egg"):
        interp.run("do(define(f, func(a, a)), f(1))")
    messages = [r.getMessage() for r in caplog.records]
    assert any("Closure created: func(a)" in m for m in messages)
    assert any("Calling func(a) with 1 argument(s)" in m for m in messages)


# ------------------ CLI ------------------

def test_cli_eval(capsys):
    assert main(["-e", "+(1, 2)"]) == 0
    assert capsys.readouterr().out == "3\n"


def test_cli_reports_errors(capsys):
    assert main(["-e", "nope"]) == 1
    err = capsys.readouterr().err
    assert "ReferenceError: Undefined binding: nope" in err


def test_cli_runs_file(tmp_path, capsys):
    program = tmp_path / "program.egg"
    program.write_text('do(define(x, 6), print(*(x, 7)))', encoding="utf-8")
    assert main([str(program)]) == 0
    assert capsys.readouterr().out == "42\n"


def test_cli_loads_prelude(tmp_path, monkeypatch, capsys):
    (tmp_path / "lib.egg").write_text("define(inc, func(n, +(n, 1)))", encoding="utf-8")
    monkeypatch.setenv("EGG_PRELUDE_PATH", str(tmp_path))
    assert main(["-e", "inc(41)"]) == 0
    assert capsys.readouterr().out == "42\n"


# ------------------ config ------------------

def test_config_defaults(monkeypatch):
    monkeypatch.delenv("EGG_PRELUDE_PATH", raising=False)
    monkeypatch.delenv("EGG_LOG_LEVEL", raising=False)
    monkeypatch.delenv("EGG_RECURSION_LIMIT", raising=False)
    assert config.get_prelude_files() == []
    assert config.get_log_level() == "WARNING"
    assert config.get_recursion_limit() is None


def test_config_from_environment(tmp_path, monkeypatch):
    a = tmp_path / "a.egg"
    a.write_text("1", encoding="utf-8")
    monkeypatch.setenv("EGG_PRELUDE_PATH", str(a))
    monkeypatch.setenv("EGG_LOG_LEVEL", "debug")
    monkeypatch.setenv("EGG_RECURSION_LIMIT", "5000")
    assert config.get_prelude_files() == [a]
    assert config.get_log_level() == "DEBUG"
    assert config.get_recursion_limit() == 5000


def test_config_rejects_bad_recursion_limit(monkeypatch):
    monkeypatch.setenv("EGG_RECURSION_LIMIT", "lots")
    with pytest.raises(ValueError):
        config.get_recursion_limit()


# ------------------ REPL ------------------

@pytest.fixture
def shell(interp):
    out = io.StringIO()
    return Shell(interp, stdout=out), out


def test_shell_evaluates_in_session(shell):
    sh, out = shell
    sh.onecmd("define(x, 2)")
    sh.onecmd("*(x, 21)")
    assert out.getvalue().splitlines() == ["2", "42"]


def test_shell_continues_open_parentheses(shell):
    sh, out = shell
    sh.onecmd("do(define(y, 1),")
    assert sh.prompt == Shell.secondary_prompt
    assert out.getvalue() == ""
    sh.onecmd("+(y, 1))")
    assert sh.prompt == Shell.prompt
    assert out.getvalue() == "2\n"


def test_shell_reports_errors_and_keeps_going(shell):
    sh, out = shell
    sh.onecmd("nope")
    sh.onecmd('"still alive"')
    assert out.getvalue().splitlines() == [
        "ReferenceError: Undefined binding: nope",
        "still alive",
    ]


def test_shell_exit(shell):
    sh, _ = shell
    assert sh.onecmd("exit") is True


@pytest.mark.parametrize(
    "text,depth",
    [("f(1, 2)", 0), ("f(", 1), ('f("(", ', 1), ("do(f(a)", 1), ("f(1))", -1)],
)
def test_open_parens(text, depth):
    assert open_parens(text) == depth


def test_cli_file_and_eval_are_exclusive(tmp_path, capsys):
    program = tmp_path / "program.egg"
    program.write_text("1", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main([str(program), "-e", "2"])
    assert exc.value.code == 2
    assert "not allowed with" in capsys.readouterr().err


def test_cli_rejects_unknown_log_level(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--log-level", "chatty", "-e", "1"])
    assert exc.value.code == 2
    assert "unknown log level: chatty" in capsys.readouterr().err


def test_cli_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.egg")]) == 1
    err = capsys.readouterr().err
    assert err.startswith("egg: ")
    assert "missing.egg" in err


def test_cli_missing_prelude(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("EGG_PRELUDE_PATH", str(tmp_path / "nowhere.egg"))
    assert main(["-e", "1"]) == 1
    assert "nowhere.egg" in capsys.readouterr().err
