import logging
import sys

from optspec.exceptions import OptionException
from optspec.parser import parse
from optspec.spec import accumulate

log = logging.getLogger("optspec")

SPECS = [
    ["-p", "--port", "Port to listen on", "default", 3000, "parse", int],
    ["-H", "--host", "Host to bind", "default", "localhost"],
    ["-I", "--include", "Include path, may repeat", {"assign": accumulate}],
    ["-v", "--[no-]verbose", "Log parser activity"],
    ["-h", "--help", "Show this banner", "flag", True],
]

def wants_verbose(argv):
    for token in argv:
        if token == "--":
            return False
        if token in ("-v", "--verbose"):
            return True
    return False

def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv

    # must precede parse() for its debug records to show
    if wants_verbose(argv):
        logging.basicConfig(level=logging.DEBUG)

    try:
        options, leftovers, banner = parse(argv, SPECS)
    except OptionException as e:
        _, _, banner = parse([], SPECS)
        print(e, file=sys.stderr)
        print(banner, end="", file=sys.stderr)
        return 1

    if options["verbose"]:
        log.debug("Parsed %r with leftovers %r", options, leftovers)

    if options["help"]:
        print(banner, end="")
        return 0

    for name in sorted(options):
        print(f"{name}: {options[name]!r}")
    print(f"leftovers: {leftovers!r}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
