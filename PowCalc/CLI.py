# CLI.py
""""Command line interface for the pow calculator.

Responsibilities
----------------
- Parse options and join all positional arguments into one operation string
- Merge options with config.json into a frozen Settings value
- Dispatch the operations to PowEngine and print one line per operation
- Print errors on stderr and turn them into the exit status
- Clipboard integration (--copy)
"""""

import sys
import argparse
import logging
import re
from dataclasses import asdict

import pyperclip
from rich.console import Console
from rich.text import Text

from . import __version__
from . import error as E
from . import config_manager as config_manager
from . import PowEngine as PowEngine
from .log_config import setup_logging

logger = logging.getLogger(__name__)

PROGRAM_NAME = "pow"

# Arguments like -2^3 or -.5^2 are operations, not options
NEGATIVE_OPERATION = re.compile(r"^-[\d.(]")

DESCRIPTION = (
    "  Commandline exponent calculator.\n"
    "\n"
    "  All parameters that are not options are concatenated together before they are parsed.\n"
    "  Operations are delimited using commas ','.\n"
)

EPILOG = (
    "EXAMPLES:\n"
    "  pow 2^8            2 ^ 8 = 256\n"
    "  pow 2^3^2          2 ^ (3 ^ 2 = 9) = 512\n"
    "  pow -q 2^3,4^2     prints 8 and 16\n"
)


def version_string(quiet=False):
    if quiet:
        return __version__
    return f"{PROGRAM_NAME}  v{__version__}"


def build_parser():
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        usage="%(prog)s [OPTIONS] <N>^<EXP>",
        description=f"{version_string()}\n{DESCRIPTION}",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("operations", nargs="*", metavar="<N>^<EXP>",
                        help="Operation(s) to calculate.")
    parser.add_argument("-v", "--version", action="store_true",
                        help="Shows the current version number, then exits.")
    parser.add_argument("-q", "--quiet", action="store_true", default=None,
                        help="Prevents non-essential console output & formatting.")
    parser.add_argument("-n", "--no-color", dest="color", action="store_false", default=None,
                        help="Disables the use of ANSI color escape sequences in console output.")
    parser.add_argument("-c", "--copy", dest="copy_to_clipboard", action="store_true", default=None,
                        help="Copies the last result line to the clipboard.")
    parser.add_argument("-k", "--keep-going", dest="keep_going", action="store_true", default=None,
                        help="Keeps calculating after an operation failed.")
    parser.add_argument("-d", "--debug", action="store_true", default=None,
                        help="Writes debug log messages to stderr.")
    parser.add_argument("--save-config", action="store_true",
                        help="Saves the effective settings to config.json.")
    return parser


def make_consoles(settings):
    """Return (stdout console, stderr console) honoring the color setting."""
    color_system = "auto" if settings.color else None
    out = Console(highlight=False, soft_wrap=True, color_system=color_system)
    err = Console(stderr=True, highlight=False, soft_wrap=True, color_system=color_system)
    return out, err


def copy_to_clipboard(text):
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        logger.warning("Could not copy to clipboard: %s", e)
        return False
    logger.debug("Copied %r to clipboard", text)
    return True


def separate_operations(argv):
    """Move option arguments in front of a '--' and the operations behind it.

    Keeps the order of the operations, so '-2^3' reaches the engine instead of argparse.
    """
    options, operations = [], []
    for position, arg in enumerate(argv):
        if arg == "--":
            operations.extend(argv[position + 1:])
            break
        if arg.startswith("-") and not NEGATIVE_OPERATION.match(arg):
            options.append(arg)
        else:
            operations.append(arg)
    return options + ["--"] + operations


def main(argv=None):
    """Run the calculator for argv and return the process exit status."""
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_args(separate_operations(list(argv)))

    settings = config_manager.load_settings(
        quiet=args.quiet,
        color=args.color,
        copy_to_clipboard=args.copy_to_clipboard,
        keep_going=args.keep_going,
        debug=args.debug,
    )
    setup_logging(logging.DEBUG if settings.debug else logging.WARNING)
    logger.debug("Settings: %s", settings)

    out, err = make_consoles(settings)

    if args.version:
        out.print(version_string(settings.quiet))
        return 0

    if args.save_config:
        config_manager.save_setting(asdict(settings))
        logger.debug("Settings saved to %s", config_manager.config_path())
        if not args.operations:
            return 0

    if not args.operations:
        parser.error("no operation given")

    raw_input = " ".join(args.operations)
    outcomes = PowEngine.calculate_all(raw_input, settings)

    last_line = None
    failed = False
    for outcome in outcomes:
        if outcome.ok:
            out.print(outcome.result.display)
            last_line = outcome.result.display_string
        else:
            failed = True
            err.print(Text(E.describe(outcome.error), style="bold red"))

    if settings.copy_to_clipboard and last_line is not None:
        copy_to_clipboard(last_line)

    return 1 if failed else 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
