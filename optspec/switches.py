"""
switches.py
turns declared switch literals into the tokens recognized on the command line.

A negatable flag is declared as `--[no-]name` and recognized as both
`--no-name` and `--name`.
"""
import re
from typing import Any, Iterable, List

NEGATION_MARKER = "[no-]"

NAME_PREFIX = re.compile(r"^--no-|^--\[no-\]|^--|^-")

def is_switch(token: Any) -> bool:
    return isinstance(token, str) and token.startswith("-")

def is_negatable(switch: str) -> bool:
    return switch.startswith("--" + NEGATION_MARKER)

def is_end_of_args(token: str) -> bool:
    return token == "--"

def name_for(switch: str) -> str:
    return NAME_PREFIX.sub("", switch, count=1)

def flag_value_for(switch: str) -> bool:
    # the literal matched decides the direction, not the canonical name
    return not switch.startswith("--no-")

def expand_switches(switches: Iterable[str], flag: bool) -> List[str]:
    expanded = []
    for s in switches:
        if flag and NEGATION_MARKER in s:
            expanded.append(s.replace(NEGATION_MARKER, "no-"))
            expanded.append(s.replace(NEGATION_MARKER, ""))
        elif flag and s.startswith("--"):
            expanded.append("--no-" + s[2:])
            expanded.append(s)
        else:
            expanded.append(s)
    return expanded
