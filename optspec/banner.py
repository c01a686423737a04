from typing import Any, List, Sequence

from optspec.spec import Option

HEADER = ["Switches", "Default", "Desc"]
SEPARATOR = ["--------", "-------", "----"]
COLUMN_GAP = "  "

def _default_text(default: Any) -> str:
    if default is Option.NoDefault or default is None:
        return ""
    return str(default)

def build_doc(option: Option) -> List[str]:
    return [", ".join(option.switches), _default_text(option.default), option.doc or ""]

def column_widths(rows: Sequence[Sequence[str]]) -> List[int]:
    return [max(len(cell) for cell in column) for column in zip(*rows)]

def format_row(row: Sequence[str], widths: Sequence[int]) -> str:
    cells = [cell.ljust(width) for cell, width in zip(row, widths)]
    return " " + COLUMN_GAP.join(cells) + " \n"

def banner_for(options: Sequence[Option]) -> str:
    rows = [HEADER, SEPARATOR] + [build_doc(option) for option in options]
    widths = column_widths(rows)
    return "Usage:\n\n" + "".join(format_row(row, widths) for row in rows)
