from optspec.exceptions import (
    InvalidArgument,
    InvalidSpec,
    MissingArgument,
    OptionException,
    OptionParseException,
    OptionSpecException,
    ValueConversionFailure,
)
from optspec.parser import ParseResult, cli, parse
from optspec.spec import Option, accumulate, assoc, compile_spec

__all__ = [
    "InvalidArgument",
    "InvalidSpec",
    "MissingArgument",
    "Option",
    "OptionException",
    "OptionParseException",
    "OptionSpecException",
    "ParseResult",
    "ValueConversionFailure",
    "accumulate",
    "assoc",
    "cli",
    "compile_spec",
    "parse",
]
