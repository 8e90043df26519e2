"""Domain ports."""

from interpose.domain.ports.decorator import DecoratorLike

__all__ = ["DecoratorLike"]
