"""
Self-registering classes.

Every class built by RegistryMeta owns its own InstanceRegistry,
created together with the class object. Calling the class
constructs the instance and, as the final step, appends it
to that registry.

    class Song(Remembered):
        def __init__(self, name):
            self.name = name

    Song("99 Problems")
    Song("Thriller")
    Song.all()   # -> (<Song 99 Problems>, <Song Thriller>)
"""

import logging
from abc import ABCMeta
from typing import Any, Callable, List, Tuple, Union

from jukebox.registry.instance_registry import InstanceRegistry

logger = logging.getLogger(__name__)

Operation = Union[str, Callable[[Any], Any]]


class RegistryMeta(ABCMeta):
    """Metaclass giving each class a private registry and auto-registration."""

    def __init__(cls, name, bases, attrs):
        super().__init__(name, bases, attrs)
        # Subclasses get a fresh registry, never the parent's
        cls._registry = InstanceRegistry(name)

    def __call__(cls, *args, **kwargs):
        instance = super().__call__(*args, **kwargs)
        cls._registry.append(instance)
        logger.debug("Registered %s #%d", cls.__name__, len(cls._registry))
        return instance


class Remembered(metaclass=RegistryMeta):
    """
    Base class for types that remember every instance of themselves.

    Class-level API:
    - all()       -> tuple of instances, construction order
    - count()     -> number of instances
    - for_each()  -> apply an operation to every instance, in order
    """

    @classmethod
    def all(cls) -> Tuple[Any, ...]:
        return cls._registry.snapshot()

    @classmethod
    def count(cls) -> int:
        return len(cls._registry)

    @classmethod
    def for_each(cls, operation: Operation) -> List[Any]:
        """
        Apply `operation` to every registered instance in construction order.

        `operation` is either a callable taking the instance, or the name
        of a method to call on each instance.

        Fail fast: the first failing entry is logged and its exception
        re-raised; remaining entries are not visited.
        """
        if isinstance(operation, str):
            method_name = operation

            def operation(instance):
                return getattr(instance, method_name)()

        results = []
        for position, instance in enumerate(cls.all()):
            try:
                results.append(operation(instance))
            except Exception:
                logger.error(
                    "%s.for_each failed at entry %d (%r)",
                    cls.__name__,
                    position,
                    instance,
                )
                raise

        return results
