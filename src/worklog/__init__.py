# SPDX-License-Identifier: MIT

from worklog.cleanup import register_cleanup
from worklog.initialize import initialize
from worklog.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
