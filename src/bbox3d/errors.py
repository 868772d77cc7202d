# bbox3d/errors.py
import logging

logger = logging.getLogger(__name__)


class PreconditionError(AssertionError):
    """
    Raised when a value would be constructed in an invalid state.

    This is a broken caller contract, not a recoverable input error; code is
    expected to guarantee the precondition instead of catching this.
    """


def require(condition, message: str) -> None:
    # Unlike `assert`, this check survives `python -O`.
    if not condition:
        logger.critical("FATAL: %s", message)
        raise PreconditionError(message)
