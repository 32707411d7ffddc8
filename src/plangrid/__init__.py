# SPDX-License-Identifier: MIT

from plangrid.cleanup import register_cleanup
from plangrid.initialize import initialize
from plangrid.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
