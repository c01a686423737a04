"""
parser.py
matches an argument vector against compiled Option records.
"""
import logging
import re
from typing import Any, Dict, List, NamedTuple, Optional, Sequence, Tuple

from optspec.banner import banner_for
from optspec.exceptions import InvalidArgument, MissingArgument, ValueConversionFailure
from optspec.spec import Option, compile_specs, default_values
from optspec.switches import flag_value_for, is_end_of_args, is_switch

log = logging.getLogger(__name__)

GNU_LONG_OPT = re.compile(r"^--[^ ]+=")

class ParseResult(NamedTuple):
    options: Dict[str, Any]
    leftovers: List[str]
    banner: str

def is_gnu_long_opt(token: str) -> bool:
    return GNU_LONG_OPT.match(token) is not None

def split_gnu_long_opt(token: str) -> List[str]:
    return token.split("=", 1)

def find_option(key: str, options: Sequence[Option]) -> Optional[Option]:
    for option in options:
        if key in option.switches:
            return option
    return None

def match(args: Sequence[str], options: Sequence[Option]) -> Tuple[str, List[str], Optional[Option]]:
    head, rest = args[0], list(args[1:])
    if is_gnu_long_opt(head):
        key, value = split_gnu_long_opt(head)
        return key, [key, value] + rest, find_option(key, options)
    return head, [head] + rest, find_option(head, options)

def _parse_value(option: Option, key: str, raw: str) -> Any:
    try:
        return option.parse(raw)
    except Exception as e:
        raise ValueConversionFailure(key, raw, str(e)) from e

def apply_specs(options: Sequence[Option], args: Sequence[str]) -> Tuple[Dict[str, Any], List[str]]:
    values = default_values(options)
    leftovers = []
    remaining = list(args)

    while remaining:
        key, remaining, option = match(remaining, options)

        if is_end_of_args(key):
            log.debug("End of options, %d tokens left over", len(remaining) - 1)
            leftovers.extend(remaining[1:])
            remaining = []
        elif is_switch(key) and option is None:
            raise InvalidArgument(key)
        elif is_switch(key) and option.flag:
            log.debug("Flag %s sets %s", key, option.name)
            values = option.assign(values, option.name, flag_value_for(key))
            remaining = remaining[1:]
        elif is_switch(key):
            if len(remaining) < 2:
                raise MissingArgument(key)
            log.debug("Option %s takes value %r", key, remaining[1])
            values = option.assign(values, option.name, _parse_value(option, key, remaining[1]))
            remaining = remaining[2:]
        else:
            log.debug("Leftover %r", remaining[0])
            leftovers.append(remaining[0])
            remaining = remaining[1:]

    return values, leftovers

def parse(args: Sequence[str], specs: Sequence[Sequence[Any]]) -> ParseResult:
    """
    Parse args against the given specs and return (options, leftovers, banner).

    Specs are compiled afresh on every call. Raises an OptionParseException
    subclass for a bad argument vector and InvalidSpec for a spec without
    switches; nothing partial is returned on failure.
    """
    options = compile_specs(specs)
    values, leftovers = apply_specs(options, args)
    return ParseResult(values, leftovers, banner_for(options))

def cli(args: Sequence[str], *specs: Sequence[Any]) -> ParseResult:
    """
    Variadic form of parse():

        options, leftovers, banner = cli(sys.argv[1:],
            ["-p", "--port", "Port to listen on", "default", 3000, "parse", int],
            ["--[no-]verbose", "Print debug output"])
    """
    return parse(args, specs)
