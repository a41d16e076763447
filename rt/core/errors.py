"""Error codes for CLI exit status.

Commands exit with one of these codes so scripts wrapping `rt` can tell a
rejected release (bad input) apart from a storage problem.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable:
    - 0: Success
    - 1: User error (invalid release, unknown id, bad option)
    - 2: Environment error (unusable config or data directory)
    - 5: I/O error (store or export could not be written)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    IO_ERROR = 5
