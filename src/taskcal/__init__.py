# SPDX-License-Identifier: MIT

from taskcal.cleanup import register_cleanup
from taskcal.errors import TaskcalError
from taskcal.initialize import initialize
from taskcal.terminal.app import exit_with_error, run


def main() -> None:
    try:
        initialize()
    except TaskcalError as e:
        exit_with_error(e)
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
