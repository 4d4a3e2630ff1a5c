import io
import os

import pytest

from minishell.builtins import (
    ShellExit,
    cd,
    echo,
    exit_builtin,
    export,
    is_builtin,
    print_env,
    pwd,
    run_builtin,
    unset,
)
from minishell.environment import Environment


def streams():
    return io.StringIO(), io.StringIO()


@pytest.mark.parametrize("name", ["cd", "pwd", "echo", "exit", "export", "env", "unset"])
def test_is_builtin_true(name):
    assert is_builtin(name) is True


@pytest.mark.parametrize("name", ["ls", "", None, "ECHO"])
def test_is_builtin_false(name):
    assert is_builtin(name) is False


def test_echo_joins_arguments_with_newline():
    out = io.StringIO()
    assert echo(["hello", "world"], out) == 0
    assert out.getvalue() == "hello world\n"


def test_echo_flag_suppresses_newline():
    out = io.StringIO()
    echo(["-n", "-nnn", "hi"], out)
    assert out.getvalue() == "hi"


def test_echo_dash_alone_is_printed():
    out = io.StringIO()
    echo(["-", "x"], out)
    assert out.getvalue() == "- x\n"


def test_echo_no_args_prints_newline():
    out = io.StringIO()
    echo([], out)
    assert out.getvalue() == "\n"


def test_echo_empty_first_argument_prints_only_newline():
    out = io.StringIO()
    echo(["", "ignored"], out)
    assert out.getvalue() == "\n"


def test_pwd_prints_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    out, err = streams()
    assert pwd(out, err) == 0
    assert out.getvalue() == os.getcwd() + "\n"


def test_cd_to_directory_updates_env(tmp_path, monkeypatch):
    start = tmp_path / "start"
    target = tmp_path / "target"
    start.mkdir()
    target.mkdir()
    monkeypatch.chdir(start)
    env = Environment(["PWD=x", "OLDPWD=y"])
    _, err = streams()
    assert cd([str(target)], env, err) == 0
    assert os.path.samefile(os.getcwd(), target)
    assert os.path.samefile(env.get("OLDPWD"), start)
    assert env.get("PWD") == os.getcwd()


def test_cd_without_args_goes_home(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    home = tmp_path / "home"
    home.mkdir()
    env = Environment([f"HOME={home}"])
    _, err = streams()
    assert cd([], env, err) == 0
    assert os.path.samefile(os.getcwd(), home)
    assert "PWD" not in env


def test_cd_without_home_reports(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _, err = streams()
    assert cd([], Environment(), err) == 1
    assert err.getvalue() == "minishell : cd:  HOME  Not set\n"


def test_cd_missing_directory_reports(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    missing = str(tmp_path / "missing")
    _, err = streams()
    assert cd([missing], Environment(), err) == 1
    assert err.getvalue() == f"minishell : cd: {missing}: No such file or directory\n"
    assert os.path.samefile(os.getcwd(), tmp_path)


def test_print_env_skips_valueless():
    env = Environment(["A=1", "B=2"])
    env.set("C", None)
    out = io.StringIO()
    assert print_env(env, out) == 0
    assert out.getvalue() == "A=1\nB=2\n"


def test_export_sets_and_appends():
    env = Environment(["A=1"])
    out, err = streams()
    assert export(["A+=2", "B=x", "C"], env, out, err) == 0
    assert env.get("A") == "12"
    assert env.get("B") == "x"
    assert "C" in env and env.get("C") is None


def test_export_append_to_new_key():
    env = Environment()
    out, err = streams()
    export(["K+=v"], env, out, err)
    assert env.get("K") == "v"


def test_export_bare_existing_key_keeps_value():
    env = Environment(["A=1"])
    out, err = streams()
    export(["A"], env, out, err)
    assert env.get("A") == "1"


def test_export_invalid_identifier_continues():
    env = Environment()
    out, err = streams()
    assert export(["1A=x", "B=y"], env, out, err) == 1
    assert err.getvalue() == "minishell: export: `1A=x': not a valid identifier\n"
    assert env.get("B") == "y"
    assert "1A" not in env


def test_export_leading_equals_stops():
    env = Environment()
    out, err = streams()
    assert export(["=x", "B=y"], env, out, err) == 1
    assert "B" not in env
    assert "not a valid identifier" in err.getvalue()


def test_export_without_args_lists_declarations():
    env = Environment(["B=2", "A=1"])
    env.set("C", None)
    out, err = streams()
    assert export([], env, out, err) == 0
    assert out.getvalue().splitlines() == env.declarations()


def test_unset_removes_variables():
    env = Environment(["A=1", "B=2", "_=x"])
    _, err = streams()
    assert unset(["A", "_"], env, err) == 0
    assert "A" not in env
    assert "B" in env
    assert "_" in env


def test_unset_invalid_identifier():
    env = Environment(["A=1"])
    _, err = streams()
    assert unset(["9a", "A"], env, err) == 1
    assert err.getvalue() == "minishell: unset: `9a': not a valid identifier\n"
    assert "A" not in env


def test_exit_without_args_uses_status():
    out, err = streams()
    with pytest.raises(ShellExit) as info:
        exit_builtin([], 7, out, err)
    assert info.value.status == 7
    assert out.getvalue() == "exit\n"


def test_exit_with_number():
    out, err = streams()
    with pytest.raises(ShellExit) as info:
        exit_builtin(["42"], 0, out, err)
    assert info.value.status == 42


def test_exit_non_numeric():
    out, err = streams()
    with pytest.raises(ShellExit) as info:
        exit_builtin(["abc"], 0, out, err)
    assert info.value.status == 255
    assert "numeric argument required" in err.getvalue()


def test_exit_too_many_arguments_does_not_exit():
    out, err = streams()
    assert exit_builtin(["1", "2"], 0, out, err) == 1
    assert "too many arguments" in err.getvalue()


def test_run_builtin_dispatches_echo():
    out, err = streams()
    assert run_builtin("echo", ["a"], Environment(), out, err, 0) == 0
    assert out.getvalue() == "a\n"


def test_run_builtin_dispatches_exit():
    out, err = streams()
    with pytest.raises(ShellExit) as info:
        run_builtin("exit", [], Environment(), out, err, 3)
    assert info.value.status == 3


def test_run_builtin_unknown():
    out, err = streams()
    with pytest.raises(ValueError):
        run_builtin("ls", [], Environment(), out, err, 0)