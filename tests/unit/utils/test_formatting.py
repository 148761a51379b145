"""Unit tests for console formatting helpers."""

import pytest
from rem.utils.formatting import (
    console,
    create_entries_table,
    format_path,
    print_numbered_list,
    quote_path,
)


class TestFormatPath:
    """Tests for format_path."""

    def test_wraps_in_path_style(self) -> None:
        assert format_path("/home/me/a.txt") == "[path]/home/me/a.txt[/]"

    def test_escapes_markup(self) -> None:
        """Brackets in file names are not interpreted as Rich markup."""
        assert format_path("/tmp/[bold]x") == "[path]/tmp/\\[bold]x[/]"


class TestQuotePath:
    """Tests for quote_path."""

    def test_plain_path_unchanged(self) -> None:
        assert quote_path("/home/me/a.txt") == "/home/me/a.txt"

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/tmp/a b", '"/tmp/a b"'),
            ("/tmp/a.txt Jan 26 14:30:05", '"/tmp/a.txt Jan 26 14:30:05"'),
            ('/tmp/say "hi"', '"/tmp/say \\"hi\\""'),
            ("/tmp/$HOME", '"/tmp/$HOME"'),
        ],
    )
    def test_quotes_when_needed(self, path: str, expected: str) -> None:
        assert quote_path(path) == expected


class TestOutput:
    """Tests for printing helpers."""

    def test_numbered_list(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_numbered_list(["/a", "/b [x]"])

        out = capsys.readouterr().out
        assert "1: /a" in out
        assert "2: /b [x]" in out

    def test_entries_table_columns(self) -> None:
        table = create_entries_table()

        assert table.title == "Trash Contents"
        assert [c.header for c in table.columns] == ["#", "Original Path", "Trashed As", "Status"]

    def test_console_has_trash_styles(self) -> None:
        for style in ["path", "trashed", "restored", "removed"]:
            assert console.get_style(style) is not None
