"""``python -m bootlog`` runs the CLI under its installed script name."""

import sys

from bootlog import cli

PROG_NAME = "bootlog"


if __name__ == "__main__":
    cli.main(prog_name=PROG_NAME)
    sys.exit(0)
