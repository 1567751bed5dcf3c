"""Tests for the help listing and table rendering."""

from plugcli.commands.interface import Command
from plugcli.help import get_commands_help, get_help
from plugcli.models import CommandDescriptor
from plugcli.utils import tablify


def descriptor(name, description):
    return CommandDescriptor(name=name, qualified_name=f"ns.{name}", description=description, usage="", factory=Command)


def test_tablify():
    """Test column padding, the last column is never padded."""
    assert tablify([["foo", "bar"], ["yada", "yada"]]) == "foo   bar\nyada  yada\n"


def test_tablify_three_columns():
    """Test every column but the last is aligned."""
    rows = [["a", "bb", "c"], ["aaa", "b", "cccc"]]
    assert tablify(rows) == "a    bb  c\naaa  b   cccc\n"


def test_tablify_empty():
    """Test an empty table renders as an empty string."""
    assert tablify([]) == ""


def test_tablify_strips_line_breaks():
    """Test that line breaks inside cells are dropped."""
    assert tablify([["fo\no", "ba\r\nr"], ["x", None]]) == "foo  bar\nx    \n"


def test_get_commands_help_sorted():
    """Test commands are sorted by name."""
    commands = [descriptor("zeta", "Z."), descriptor("alpha", "A."), descriptor("mid", "M.")]
    assert get_commands_help(commands) == [("alpha", "A."), ("mid", "M."), ("zeta", "Z.")]


def test_get_help():
    """Test the listing is framed by message and hint."""
    commands = [descriptor("version", "Show versions."), descriptor("cgi", "Start with CGI.")]
    assert get_help(commands, "Commands:\n", "\nSee more.\n") == "Commands:\n cgi      Start with CGI.\n version  Show versions.\n\nSee more.\n"


def test_get_help_without_commands():
    """Test an empty listing keeps message and hint."""
    assert get_help([], "Commands:\n", "\nhint\n") == "Commands:\n\nhint\n"
