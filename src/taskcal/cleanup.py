# SPDX-License-Identifier: MIT

import atexit

from taskcal.repository.configuration import CONFIGURATION_REPO
from taskcal.repository.cursor import CURSOR_REPO


def flush() -> None:
    CONFIGURATION_REPO.flush()
    CURSOR_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush)
