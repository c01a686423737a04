"""
spec.py
compiles declarative option specs into Option records.

A raw spec lists the switches (least to most specific), an optional doc
string, then option pairs:

    ["-p", "--port", "Port to listen on", "default", 3000, "parse", int]

Custom keys are kept in Option.extras. Pairs may also be given as a mapping,
which is needed when a custom key directly follows the switches:

    ["-o", "--out", "Output file", "metavar", "FILE"]
    ["-H", "--header", {"assign": accumulate, "metavar": "H"}]
"""
import logging
from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

from optspec.exceptions import InvalidSpec
from optspec.switches import expand_switches, is_negatable, is_switch, name_for

log = logging.getLogger(__name__)

OPTION_KEYS = ("default", "parse", "flag", "assign", "name", "doc", "switches", "aliases")

def identity(value: Any) -> Any:
    return value

def assoc(options: Dict[str, Any], name: str, value: Any) -> Dict[str, Any]:
    updated = dict(options)
    updated[name] = value
    return updated

def accumulate(options: Dict[str, Any], name: str, value: Any) -> Dict[str, Any]:
    """
    Collect every value given for an option into a list, in order.

    A declared default goes through here too and becomes the first element,
    so `"default", []` yields `[[], ...]`; leave the default out to start
    from an empty collection.
    """
    updated = dict(options)
    updated[name] = list(options.get(name, [])) + [value]
    return updated

class Option(object):
    __slots__ = ['switches', 'aliases', 'name', 'doc', 'flag', 'default', 'parse', 'assign', 'extras']

    NoDefault = object() # immutable sentinel

    def __init__(self, switches: Sequence[str], aliases: Iterable[str], name: str, doc: str = "",
                 flag: bool = False, default: Any = NoDefault,
                 parse: Callable[[str], Any] = identity,
                 assign: Callable[[Dict[str, Any], str, Any], Dict[str, Any]] = assoc,
                 extras: Optional[Dict[str, Any]] = None):
        self.switches = tuple(switches)
        self.aliases = frozenset(aliases)
        self.name = name
        self.doc = doc
        self.flag = bool(flag)
        self.default = default
        self.parse = parse
        self.assign = assign
        self.extras = dict(extras or {})

    @property
    def has_default(self) -> bool:
        return self.default is not self.NoDefault

    def __repr__(self):
        return f"Option({self.name!r}, switches={list(self.switches)!r}, flag={self.flag})"

def partition(raw_spec: Sequence[Any]):
    items = list(raw_spec)
    i = 0
    while i < len(items) and is_switch(items[i]):
        i += 1
    switches, items = items[:i], items[i:]

    docs = []
    if items and isinstance(items[0], str) and items[0] not in OPTION_KEYS:
        docs, items = items[:1], items[1:]

    options = {}
    while items:
        head = items.pop(0)
        if isinstance(head, Mapping):
            options.update(head)
        elif items:
            options[head] = items.pop(0)
        else:
            log.warning("Ignoring option key %r without a value in spec %r", head, raw_spec)
    return switches, docs, options

def compile_spec(raw_spec: Sequence[Any]) -> Option:
    switches, docs, options = partition(raw_spec)
    if not switches:
        raise InvalidSpec(raw_spec)

    aliases = [name_for(s) for s in switches]
    flag = is_negatable(switches[-1]) or bool(options.get("flag"))

    fields = {
        "switches": expand_switches(switches, flag),
        "aliases": aliases,
        "name": aliases[-1],
        "doc": docs[0] if docs else "",
        "flag": flag,
    }
    if flag:
        fields["default"] = False

    extras = {}
    for key, value in options.items():
        if key in OPTION_KEYS:
            fields[key] = value
        else:
            extras[key] = value

    option = Option(extras=extras, **fields)
    log.debug("Compiled %r", option)
    return option

def compile_specs(raw_specs: Iterable[Sequence[Any]]) -> List[Option]:
    options = [compile_spec(raw) for raw in raw_specs]
    owners = {}
    for option in options:
        for switch in option.switches:
            if switch in owners:
                log.warning("Switch %s of %s is shadowed by %s", switch, option.name, owners[switch])
            else:
                owners[switch] = option.name
    return options

def default_values(options: Iterable[Option]) -> Dict[str, Any]:
    values = {}
    for option in options:
        if option.has_default:
            values = option.assign(values, option.name, option.default)
    return values
