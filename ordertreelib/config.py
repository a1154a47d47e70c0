"""Configuration system for OrderTreeLib.

This module defines how users tune the two cores: how the ordered tree walks
its nodes (recursively or with an explicit stack) and how strictly a range
producer and its collectors guard against runaway input.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class ConfigurationError(Exception):
    """Raised when a configuration fails validation."""
    pass


class TraversalMode(Enum):
    """How insert and visit walk the tree.

    Both modes produce the same shape and the same traversal order.
    """
    RECURSIVE = "recursive"    # Native call stack, depth == tree height
    ITERATIVE = "iterative"    # Explicit stack, bounded native stack


@dataclass
class TreeConfig:
    """Configuration for an OrderedTree."""

    mode: TraversalMode = TraversalMode.RECURSIVE
    height_warning: Optional[int] = 500  # Log once when height passes this

    @classmethod
    def deep_safe(cls) -> 'TreeConfig':
        """Create config for heavily skewed input (e.g. sorted insertions).

        Returns:
            TreeConfig using iterative insert/visit with no height warning
        """
        return cls(mode=TraversalMode.ITERATIVE, height_warning=None)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.mode, TraversalMode):
            errors.append(f"mode must be a TraversalMode, got {self.mode!r}")

        if self.height_warning is not None and self.height_warning <= 0:
            errors.append("height_warning must be positive")

        return errors


@dataclass
class RangeConfig:
    """Configuration for range producers and collectors.

    The defaults are permissive: a non-positive step with start < end yields
    a producer that never terminates, and collectors drain without a bound.
    """

    validate_step: bool = False          # Reject non-terminating steps
    max_items: Optional[int] = None      # Collector bound (None = unlimited)

    @classmethod
    def strict(cls, max_items: Optional[int] = 1_000_000) -> 'RangeConfig':
        """Create config that rejects runaway ranges.

        Args:
            max_items: Largest sequence a collector may build

        Returns:
            RangeConfig with step validation and a collection bound
        """
        return cls(validate_step=True, max_items=max_items)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.max_items is not None and self.max_items < 0:
            errors.append("max_items cannot be negative")

        return errors


def ensure_valid(config) -> None:
    """Raise ConfigurationError if ``config.validate()`` reports problems."""
    errors = config.validate()
    if errors:
        raise ConfigurationError(
            f"Invalid {config.__class__.__name__}: {'; '.join(errors)}"
        )
