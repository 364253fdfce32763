# SPDX-License-Identifier: MIT


class TaskcalError(Exception):
    """Base class for errors reported to the user as a clean CLI failure."""


class ConfigurationError(TaskcalError):
    pass


class TaskSourceError(TaskcalError):
    pass
