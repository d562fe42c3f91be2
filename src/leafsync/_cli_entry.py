"""Console-script entry point for ``leafsync``.

The command line lives behind the optional ``cli`` extra; without click
installed the script exits with an install hint instead of a traceback.
"""

import sys

_MISSING_CLICK = (
    "leafsync: the command-line interface needs click.\n"
    "Install the extra with:  pip install 'leafsync[cli]'"
)


def main():
    try:
        from .cli import main as cli_main
    except ModuleNotFoundError as exc:
        if exc.name != "click":
            raise
        print(_MISSING_CLICK, file=sys.stderr)
        raise SystemExit(1)
    cli_main(prog_name="leafsync")
