"""Syntax checks applied to a command line before it is parsed."""

from __future__ import annotations

SYNTAX_STATUS = 258
HEREDOC_LIMIT = 16
HEREDOC_LIMIT_STATUS = 2

UNEXPECTED_EOF = "minishell: syntax error: unexpected end of file"
UNCLOSED_SINGLE = "minishell: unexpected EOF while looking for matching `''"
UNCLOSED_DOUBLE = "minishell: unexpected EOF while looking for matching `\"'"
UNEXPECTED_PIPE = "bash: syntax error near unexpected token `|'"
UNEXPECTED_NEWLINE = "minishell: syntax error near unexpected token `newline'"
HEREDOC_LIMIT_MESSAGE = "minishell-3.2: maximum here-document count exceeded"

_BLANKS = (" ", "\t")


class ShellSyntaxError(Exception):
    """A command line that cannot be parsed."""

    def __init__(self, message: str, status: int = SYNTAX_STATUS) -> None:
        super().__init__(message)
        self.message = message
        self.status = status


class HeredocLimitError(Exception):
    """Too many here-documents on one command line."""

    def __init__(
        self, message: str = HEREDOC_LIMIT_MESSAGE, status: int = HEREDOC_LIMIT_STATUS
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status


def _at(line: str, i: int) -> str:
    return line[i] if i < len(line) else ""


def _skip_quoted(line: str, i: int) -> int:
    """Return the index just past the quoted run that starts at ``i``."""
    closing = line.find(line[i], i + 1)
    return len(line) if closing == -1 else closing + 1


def check_quotes(line: str) -> None:
    """Raise ShellSyntaxError if a quote is left open."""
    single = double = 0
    i, n = 0, len(line)
    while i < n:
        ch = line[i]
        if ch in ('"', "'"):
            other = "'" if ch == '"' else '"'
            if ch == '"':
                double += 1
            else:
                single += 1
            i += 1
            while i < n and line[i] != ch:
                if line[i] == other:
                    if other == "'":
                        single += 1
                    else:
                        double += 1
                i += 1
            if i < n:
                single = double = 0
                i += 1
        else:
            i += 1
    if single % 2 == 1:
        raise ShellSyntaxError(f"{UNCLOSED_SINGLE}\n{UNEXPECTED_EOF}")
    if double % 2 == 1:
        raise ShellSyntaxError(f"{UNCLOSED_DOUBLE}\n{UNEXPECTED_EOF}")


def check_pipes(line: str) -> None:
    """Raise ShellSyntaxError for a misplaced pipe."""
    n = len(line)
    i = 0
    while i < n and line[i] in _BLANKS:
        i += 1
    if _at(line, i) == "|":
        raise ShellSyntaxError(UNEXPECTED_PIPE)
    while i < n:
        ch = line[i]
        if ch in ('"', "'"):
            i = _skip_quoted(line, i)
        elif ch == "|":
            i += 1
            while i < n and line[i] in _BLANKS:
                i += 1
            if _at(line, i) == "|":
                raise ShellSyntaxError(UNEXPECTED_PIPE)
            if i >= n:
                raise ShellSyntaxError(UNEXPECTED_EOF)
        else:
            i += 1


def _check_operator(line: str, i: int, op: str) -> int:
    i += 1
    if _at(line, i) == op:
        i += 1
    if _at(line, i) == op:
        raise ShellSyntaxError(f"minishell: syntax error near unexpected token `{op}'")
    while i < len(line) and line[i] in _BLANKS:
        i += 1
    if i >= len(line) or line[i] in ("<", ">", "|"):
        raise ShellSyntaxError(UNEXPECTED_NEWLINE)
    return i


def check_redirections(line: str) -> None:
    """Raise ShellSyntaxError for a redirection without a target."""
    i, n = 0, len(line)
    while i < n:
        ch = line[i]
        if ch in ('"', "'"):
            i = _skip_quoted(line, i)
        elif ch in ("<", ">"):
            i = _check_operator(line, i, ch)
        else:
            i += 1


def check_heredoc_count(line: str) -> None:
    """Raise HeredocLimitError when more than the allowed here-documents appear."""
    count = sum(1 for a, b in zip(line, line[1:]) if a == "<" and b == "<")
    if count > HEREDOC_LIMIT:
        raise HeredocLimitError()


def check_syntax(line: str) -> None:
    """Run every check in order; the first problem found is raised."""
    check_quotes(line)
    check_pipes(line)
    check_redirections(line)
    check_heredoc_count(line)