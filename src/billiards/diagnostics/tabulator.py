from __future__ import annotations

from typing import List, Optional, Sequence, TextIO


class Tabulator:
    """Fixed-width console table with a header row and boxed borders."""

    def __init__(self, header: Sequence[str]):
        self.header = [str(h) for h in header]
        self.rows: List[List[str]] = []
        self.column_widths = [len(h) for h in self.header]

    def append(self, row: Sequence[object]) -> None:
        cells = [str(c) for c in row]
        if len(cells) != len(self.header):
            raise ValueError(f"expected {len(self.header)} cells, got {len(cells)}")
        for i, s in enumerate(cells):
            self.column_widths[i] = max(self.column_widths[i], len(s))
        self.rows.append(cells)

    def render(self) -> str:
        text_len = sum(self.column_widths)
        margin_len = 3 * len(self.column_widths) - 1
        lines = ["+" + "_" * (text_len + margin_len) + "+"]
        lines.append(self._row(self.header))
        lines.append("|" + "|".join("-" * (w + 2) for w in self.column_widths) + "|")
        lines.extend(self._row(r) for r in self.rows)
        lines.append("+" + "-" * (text_len + margin_len) + "+")
        return "\n".join(lines)

    def _row(self, row: Sequence[str]) -> str:
        return "|" + "|".join(f" {s.ljust(w)} " for s, w in zip(row, self.column_widths)) + "|"

    def display(self, out: Optional[TextIO] = None) -> None:
        print(self.render(), file=out)
