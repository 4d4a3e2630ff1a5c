"""The commands the shell runs itself instead of starting a program."""

from __future__ import annotations

import os
import string
from collections.abc import Sequence
from typing import TextIO

from minishell.environment import Environment, parse_assignment

BUILTINS = frozenset({"cd", "pwd", "echo", "exit", "export", "env", "unset"})

NUMERIC_STATUS = 255

_NAME_CHARS = frozenset(string.ascii_letters + string.digits + "_")
_DIGITS = frozenset(string.digits)
_WHITESPACE = frozenset(" \t\n\v\f\r")


class ShellExit(Exception):
    """Raised by ``exit`` to end the shell with ``status``."""

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status


def is_builtin(name: str | None) -> bool:
    """Tell whether ``name`` is one of the shell's own commands."""
    return name in BUILTINS


def _is_echo_flag(arg: str) -> bool:
    return len(arg) >= 2 and arg[0] == "-" and all(ch == "n" for ch in arg[1:])


def echo(args: Sequence[str], out: TextIO) -> int:
    """Print the arguments separated by spaces; ``-n`` flags drop the newline."""
    if not args or args[0] == "":
        out.write("\n")
        return 0
    i = 0
    while i < len(args) and _is_echo_flag(args[i]):
        i += 1
    out.write(" ".join(args[i:]))
    if i == 0:
        out.write("\n")
    return 0


def _cwd() -> str | None:
    try:
        return os.getcwd()
    except OSError:
        return None


def pwd(out: TextIO, err: TextIO) -> int:
    """Print the working directory."""
    try:
        cwd = os.getcwd()
    except OSError as exc:
        err.write(f"getcwd error: {exc.strerror}\n")
        return 1
    out.write(cwd + "\n")
    return 0


def _update(env: Environment, key: str, value: str | None) -> None:
    """Change ``key`` only if it is already defined."""
    if key in env and value is not None:
        env.set(key, value)


def cd(args: Sequence[str], env: Environment, err: TextIO) -> int:
    """Change directory to the first argument, or to ``$HOME`` without one.

    ``OLDPWD`` and ``PWD`` are updated when they exist.
    """
    old = _cwd()
    if not args:
        home = env.get("HOME")
        _update(env, "OLDPWD", old)
        try:
            if not home:
                raise FileNotFoundError(home)
            os.chdir(home)
        except OSError:
            err.write("minishell : cd:  HOME  Not set\n")
            return 1
        _update(env, "PWD", _cwd())
        return 0
    path = args[0]
    try:
        os.chdir(path)
    except OSError:
        if not path.startswith("."):
            err.write(f"minishell : cd: {path}: No such file or directory\n")
        return 1
    _update(env, "OLDPWD", old)
    _update(env, "PWD", _cwd())
    return 0


def print_env(env: Environment, out: TextIO) -> int:
    """Print every variable that has a value as ``KEY=VALUE``."""
    for entry in env.to_list():
        out.write(entry + "\n")
    return 0


def _valid_export_name(arg: str) -> bool:
    if not arg or arg[0] in _DIGITS:
        return False
    for index, ch in enumerate(arg):
        if ch == "=":
            return True
        if ch == "+" and arg[index + 1 : index + 2] == "=":
            return True
        if ch not in _NAME_CHARS:
            return False
    return True


def _export_error(arg: str, err: TextIO) -> None:
    err.write(f"minishell: export: `{arg}': not a valid identifier\n")


def export(args: Sequence[str], env: Environment, out: TextIO, err: TextIO) -> int:
    """Define or append to variables; without arguments list them sorted."""
    if not args:
        for line in env.declarations():
            out.write(line + "\n")
        return 0
    status = 0
    for arg in args:
        if arg.startswith("="):
            _export_error(arg, err)
            return 1
        if not _valid_export_name(arg):
            _export_error(arg, err)
            status = 1
            continue
        key, value, append = parse_assignment(arg)
        if key in env:
            if append:
                env.set(key, (env.get(key) or "") + (value or ""))
            elif value is not None:
                env.set(key, value)
        else:
            env.set(key, value)
    return status


def _valid_unset_name(arg: str) -> bool:
    if arg[:1] in _DIGITS:
        return False
    return all(ch in _NAME_CHARS for ch in arg)


def unset(args: Sequence[str], env: Environment, err: TextIO) -> int:
    """Remove variables; ``_`` is never removed."""
    status = 0
    for arg in args:
        if not _valid_unset_name(arg):
            err.write(f"minishell: unset: `{arg}': not a valid identifier\n")
            status = 1
    for arg in args:
        if arg != "_":
            env.remove(arg)
    return status


def _is_numeric(arg: str) -> bool:
    compact = "".join(ch for ch in arg if ch not in _WHITESPACE)
    if not compact:
        return False
    i, n = 0, len(compact)
    while i < n:
        if compact[i] == "-":
            i += 1
        if i >= n or compact[i] not in _DIGITS:
            return False
        i += 1
    return True


def _to_int(arg: str) -> int:
    text = arg.lstrip(" \t\n\v\f\r")
    sign = 1
    if text[:1] in ("-", "+"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    digits = []
    for ch in text:
        if ch not in _DIGITS:
            break
        digits.append(ch)
    return sign * int("".join(digits) or "0")


def exit_builtin(args: Sequence[str], status: int, out: TextIO, err: TextIO) -> int:
    """Leave the shell by raising ShellExit.

    With too many arguments nothing is left and 1 is returned.
    """
    out.write("exit\n")
    if not args:
        raise ShellExit(status)
    first = args[0]
    if not _is_numeric(first):
        err.write(f"minishell: exit: {first} : numeric argument required\n")
        raise ShellExit(NUMERIC_STATUS)
    if first[0] in _DIGITS and len(args) > 1:
        err.write(f"minishell : exit: {first} too many arguments\n")
        return 1
    raise ShellExit(_to_int(first) % 256)


def run_builtin(
    name: str,
    args: Sequence[str],
    env: Environment,
    out: TextIO,
    err: TextIO,
    status: int,
) -> int:
    """Run the builtin ``name`` and return its exit status."""
    if name == "echo":
        return echo(args, out)
    if name == "pwd":
        return pwd(out, err)
    if name == "cd":
        return cd(args, env, err)
    if name == "env":
        return print_env(env, out)
    if name == "export":
        return export(args, env, out, err)
    if name == "unset":
        return unset(args, env, err)
    if name == "exit":
        return exit_builtin(args, status, out, err)
    raise ValueError(f"not a builtin: {name}")