"""Lazy-pull producers for OrderTreeLib.

A producer is any object with a ``next()`` method that returns one value per
call, or ``None`` once it has nothing more to give. Nothing is materialized
until a caller asks for it. Because ``None`` means "exhausted", producers
cannot emit ``None`` as a value.
"""

import logging
import math
from abc import ABC, abstractmethod
from typing import Generic, Iterable, Iterator, Optional, Protocol, TypeVar, runtime_checkable

from ..config import RangeConfig, ensure_valid

logger = logging.getLogger(__name__)

T = TypeVar('T')
T_co = TypeVar('T_co', covariant=True)


class InvalidStepError(ValueError):
    """Raised by a strict range whose step would never reach the end."""
    pass


@runtime_checkable
class SupportsNext(Protocol[T_co]):
    """Anything exposing a ``next()`` that yields a value or ``None``."""

    def next(self) -> Optional[T_co]:
        ...


class Producer(ABC, Generic[T]):
    """Base class for stateful lazy-pull producers.

    Subclasses implement ``next``. The base class makes every producer a
    Python iterator as well, so ``for value in producer`` pulls the same
    values ``next()`` would.
    """

    @abstractmethod
    def next(self) -> Optional[T]:
        """Return the next value, or None once exhausted.

        Exhaustion is permanent: after the first None every call returns None.
        """
        pass

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        value = self.next()
        if value is None:
            raise StopIteration
        return value


class LazyRange(Producer[float]):
    """Half-open numeric range ``[start, end)`` produced on demand.

    Values are computed as ``start + index * step`` so long ranges do not
    accumulate floating-point drift. A non-positive step with
    ``start < end`` never terminates unless ``RangeConfig.validate_step``
    is set.

    Example:
        >>> r = LazyRange(0.0, 1.0, 0.25)
        >>> [r.next() for _ in range(5)]
        [0.0, 0.25, 0.5, 0.75, None]
    """

    def __init__(self,
                 start: float,
                 end: float,
                 step: float = 1.0,
                 config: Optional[RangeConfig] = None):
        """Create a producer positioned at ``start``.

        Args:
            start: First value produced (if below end)
            end: Exclusive upper bound
            step: Increment between values
            config: Range configuration (defaults to RangeConfig())

        Raises:
            ConfigurationError: If the config fails validation
            InvalidStepError: If validate_step is set and step cannot
                reach end
        """
        self.config = config or RangeConfig()
        ensure_valid(self.config)

        if self.config.validate_step and start < end:
            if math.isnan(step) or step <= 0:
                raise InvalidStepError(
                    f"step {step!r} never reaches end {end!r} from start {start!r}"
                )

        self.start = start
        self.end = end
        self.step = step
        self._index = 0
        self._exhausted = False

    @property
    def current(self) -> float:
        """The value the next call would produce if not exhausted."""
        return self.start + self._index * self.step

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def next(self) -> Optional[float]:
        if self._exhausted:
            return None

        result = self.current
        if result >= self.end:
            self._exhausted = True
            logger.debug("LazyRange exhausted after %d values", self._index)
            return None

        self._index += 1
        return result

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(start={self.start!r}, end={self.end!r}, "
            f"step={self.step!r}, exhausted={self._exhausted})"
        )


class IteratorProducer(Producer[T]):
    """Adapts any Python iterable to the ``next()`` capability.

    Useful for feeding lists, generators or an OrderedTree into a
    SequenceCollector. A ``None`` element cannot be told apart from
    exhaustion, so the source must not yield one.
    """

    def __init__(self, source: Iterable[T]):
        self._iterator = iter(source)
        self._exhausted = False

    def next(self) -> Optional[T]:
        if self._exhausted:
            return None
        try:
            value = next(self._iterator)
        except StopIteration:
            self._exhausted = True
            return None
        if value is None:
            self._exhausted = True
            raise ValueError(
                "source yielded None, which producers reserve for exhaustion"
            )
        return value
