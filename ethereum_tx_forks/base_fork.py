"""Abstract base class for Ethereum forks."""

from abc import ABC, ABCMeta, abstractmethod
from typing import ClassVar, List, Optional, Type

from .gas_costs import GasCosts


class BaseForkMeta(ABCMeta):
    """Metaclass for BaseFork."""

    @abstractmethod
    def name(cls) -> str:
        """Return the name of the fork (e.g., Berlin), must be implemented by subclasses."""
        pass

    def __repr__(cls) -> str:
        """Print the name of the fork, instead of the class."""
        return cls.name()

    def __gt__(cls, other: "BaseForkMeta") -> bool:
        """Compare if a fork is newer than some other fork (cls > other)."""
        return cls is not other and issubclass(cls, other)

    def __ge__(cls, other: "BaseForkMeta") -> bool:
        """Compare if a fork is newer than or equal to some other fork (cls >= other)."""
        return cls is other or issubclass(cls, other)

    def __lt__(cls, other: "BaseForkMeta") -> bool:
        """Compare if a fork is older than some other fork (cls < other)."""
        # "Older" means other is a subclass of cls, but not the same.
        return cls is not other and issubclass(other, cls)

    def __le__(cls, other: "BaseForkMeta") -> bool:
        """Compare if a fork is older than or equal to some other fork (cls <= other)."""
        return cls is other or issubclass(other, cls)


class BaseFork(ABC, metaclass=BaseForkMeta):
    """
    An abstract class representing an Ethereum fork.

    Must contain all the methods used by every fork.
    """

    _hardfork_name: ClassVar[Optional[str]] = None

    def __init_subclass__(cls, *, hardfork_name: Optional[str] = None) -> None:
        """Initialize new fork with values that don't carry over to subclass forks."""
        cls._hardfork_name = hardfork_name

    # Gas related abstract methods

    @classmethod
    @abstractmethod
    def gas_costs(cls) -> GasCosts:
        """Return dataclass with the transaction gas costs constants for the fork."""
        pass

    # Transaction related abstract methods

    @classmethod
    @abstractmethod
    def eips(cls) -> List[int]:
        """Return the list of EIPs active at the fork, including those of previous forks."""
        pass

    # Meta information about the fork

    @classmethod
    def name(cls) -> str:
        """Return name of the fork."""
        return cls.__name__

    @classmethod
    def hardfork_name(cls) -> str:
        """Return the name of the fork as used by chain configurations (e.g. `spuriousDragon`)."""
        if cls._hardfork_name is not None:
            return cls._hardfork_name
        name = cls.name()
        return name[0].lower() + name[1:]


Fork = Type[BaseFork]
