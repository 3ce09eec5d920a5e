"""Text helpers used when rendering help output."""

from __future__ import annotations


def _width(text: str) -> int:
    return len(text.encode("utf-8"))


def subtract(a: int, b: int) -> int:
    """Return ``a - b``."""
    return a - b


def indent(spaces: int, text: str) -> str:
    """Prefix every line of ``text`` with ``spaces`` spaces."""
    pad = " " * spaces
    return pad + text.replace("\n", "\n" + pad)


def nindent(spaces: int, text: str) -> str:
    """Like :func:`indent`, with a leading newline."""
    return "\n" + indent(spaces, text)


def wrap(text: str, offset: int, wrap_at: int) -> str:
    """Wrap each line of ``text`` at ``wrap_at`` columns.

    Lines after the first are indented by ``offset`` spaces; empty lines
    stay empty.
    """
    padding = " " * offset
    wrapped = []
    for number, line in enumerate(text.split("\n")):
        if not line:
            wrapped.append(line)
            continue
        result = wrap_line(line, offset, wrap_at, padding)
        wrapped.append(result if number == 0 else padding + result)
    return "\n".join(wrapped)


def wrap_line(line: str, offset: int, wrap_at: int, padding: str) -> str:
    """Wrap a single line on word boundaries, padding continuation lines."""
    if wrap_at <= offset or _width(line) <= wrap_at - offset:
        return line

    line_width = wrap_at - offset
    words = line.split()
    if not words:
        return line

    wrapped = words[0]
    space_left = line_width - _width(wrapped)
    for word in words[1:]:
        size = _width(word)
        if size + 1 > space_left:
            wrapped += "\n" + padding + word
            space_left = line_width - size
        else:
            wrapped += " " + word
            space_left -= 1 + size
    return wrapped


def offset(text: str, fixed: int) -> int:
    """Return the width of ``text`` plus ``fixed``."""
    return _width(text) + fixed


def offset_commands(commands, fixed: int) -> int:
    """Return the widest joined name list among ``commands`` plus ``fixed``.

    Each command must offer a ``names()`` method.
    """
    widest = max((_width(", ".join(c.names())) for c in commands), default=0)
    return widest + fixed


def cli_arg_contains(flag_name: str, args) -> bool:
    """Report whether any comma-separated name of a flag appears in ``args``.

    Single-character names are matched with one dash, longer ones with two.
    """
    for name in flag_name.split(","):
        name = name.strip()
        dashes = min(len(name), 2)
        if "-" * dashes + name in args:
            return True
    return False