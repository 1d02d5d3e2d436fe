"""Helper methods to resolve forks by name."""

from typing import Annotated, Any, Callable, List, Type

from pydantic import PlainSerializer, PlainValidator

from .base_fork import BaseFork
from .forks import forks


class InvalidForkError(Exception):
    """Invalid fork error raised when the fork specified is not found or incompatible."""

    def __init__(self, message):
        """Initialize the InvalidForkError exception."""
        super().__init__(message)


all_forks: List[Type[BaseFork]] = []
for fork_name in forks.__dict__:
    fork = forks.__dict__[fork_name]
    if not isinstance(fork, type):
        continue
    if issubclass(fork, BaseFork) and fork is not BaseFork:
        all_forks.append(fork)


def get_forks() -> List[Type[BaseFork]]:
    """
    Return list of all the fork classes implemented by
    `ethereum_tx_forks` ordered chronologically by deployment.
    """
    return all_forks


def get_fork_by_name(fork_name: str) -> Type[BaseFork] | None:
    """Get a fork by its class name (`Paris`) or its hard-fork name (`merge`)."""
    for fork in get_forks():
        if fork_name in (fork.name(), fork.hardfork_name()):
            return fork
    return None


def fork_validator_generator(
    cls_name: str, forks: List[Type[BaseFork]]
) -> Callable[[Any], Type[BaseFork]]:
    """Generate a fork validator function."""
    forks_dict = {fork.name(): fork for fork in forks} | {
        fork.hardfork_name(): fork for fork in forks
    }

    def fork_validator(obj: Any) -> Type[BaseFork]:
        """Get a fork by name or raise an error."""
        if obj is None:
            raise InvalidForkError("Fork cannot be None")
        if isinstance(obj, type) and issubclass(obj, BaseFork):
            return obj
        if isinstance(obj, str):
            if obj in forks_dict:
                return forks_dict[obj]
        raise InvalidForkError(f"Invalid {cls_name}: {obj} (type: {type(obj)})")

    return fork_validator


# Annotated Pydantic-Friendly Fork Type
Fork = Annotated[
    Type[BaseFork],
    PlainSerializer(lambda fork: fork.hardfork_name()),
    PlainValidator(fork_validator_generator("Fork", all_forks)),
]
