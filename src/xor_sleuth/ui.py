from typing import Iterable

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from xor_sleuth.models.search_outcome import KeyDiagnostic, SearchOutcome

STYLES = {
    "filtered": "dim",
    "scored": "green",
    "best": "bold yellow",
}


def get_console(stderr: bool = False) -> Console:
    return Console(stderr=stderr, highlight=False)


def key_table(diagnostics: Iterable[KeyDiagnostic], best_key: int = -1) -> Table:
    """One row per candidate key: error count, and angle plus decode when scored."""
    t = Table(show_header=True, show_lines=False, show_edge=False, padding=(0, 1))
    t.add_column("Key", justify="center", no_wrap=True)
    t.add_column("Errors", justify="right", no_wrap=True)
    t.add_column("Angle", justify="right", no_wrap=True)
    t.add_column("Decoded", overflow="fold")
    for d in diagnostics:
        if d.key == best_key:
            style = STYLES["best"]
        elif d.scored:
            style = STYLES["scored"]
        else:
            style = STYLES["filtered"]
        angle = f"{d.angle:.5f}" if d.scored else ""
        decoded = Text(d.decoded) if d.decoded is not None else Text("")
        t.add_row(f"{d.key:02x}", str(d.bad_bytes), angle, decoded, style=style)
    return t


def result_panel(outcome: SearchOutcome) -> Panel:
    body = Text(outcome.text)
    title = f"Best key {outcome.key:02x}  |  angle {outcome.angle:.5f}  |  {outcome.scored_count} scored"
    return Panel(body, title=title, padding=(0, 1))


def show_search(console: Console, outcome: SearchOutcome, show_keys: bool = True) -> None:
    if show_keys:
        console.print(key_table(outcome.diagnostics, best_key=outcome.key))
    console.print(f"Best key {outcome.key:02x}")
    console.print(result_panel(outcome))
