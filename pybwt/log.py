import typing as T
import logging

logger = logging.getLogger("pybwt")


# basically log(*args), but debug
def log(*args: T.Any) -> None:
    # skip the join when DEBUG is off
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(" ".join(map(str, args)))
