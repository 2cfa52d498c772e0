import io

from rich.console import Console
from xor_sleuth.algorithm.key_search import brute_force
from xor_sleuth.models.search_outcome import KeyDiagnostic
from xor_sleuth.ui import key_table, show_search
from xor_sleuth.utils import xor_bytes


def render(renderable) -> str:
    console = Console(width=200, record=True, file=io.StringIO())
    console.print(renderable)
    return console.export_text()


class TestKeyTable:
    """Test suite for key_table"""

    def test_rows(self):
        diagnostics = [
            KeyDiagnostic(0x00, 3),
            KeyDiagnostic(0x41, 0, "hello", 0.5),
        ]
        text = render(key_table(diagnostics))
        assert "00" in text
        assert "41" in text
        assert "0.50000" in text
        assert "hello" in text

    def test_markup_is_not_interpreted(self):
        """Test decoded text containing brackets is shown as-is"""
        text = render(key_table([KeyDiagnostic(0x01, 0, "[bold]x[/bold]", 0.1)]))
        assert "[bold]x[/bold]" in text


class TestShowSearch:
    """Test suite for show_search"""

    def test_best_key_line(self):
        outcome = brute_force(xor_bytes(b"Attack at dawn", 0x31))
        console = Console(width=200, record=True, file=io.StringIO())
        show_search(console, outcome, show_keys=False)
        text = console.export_text()
        assert "Best key 31" in text
        assert "Attack at dawn" in text
