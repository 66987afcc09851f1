# SPDX-License-Identifier: MIT

from wakabox.cleanup import register_cleanup
from wakabox.initialize import initialize
from wakabox.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
