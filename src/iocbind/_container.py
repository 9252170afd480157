from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any, TypeVar, overload


if TYPE_CHECKING:
    from ._token import ID, FactoryOf, Token

    T = TypeVar("T")


logger = logging.getLogger(__name__)


class BindingNotFoundError(KeyError):
    """Raised when an id is bound neither locally nor in any parent container."""

    def __init__(self, id: ID) -> None:  # noqa: A002
        super().__init__(id)
        self.id = id

    def __str__(self) -> str:
        return f"Binding not found for id: {self.id!r}"


class Container:
    """Minimal IoC container.

    - bind factories to ids; every ``get`` calls the factory again
    - factories receive an ``inject`` callable to pull their own dependencies
    - lookups fall back to parent containers, in the order they were added
    - child containers scope temporary bindings without touching the parent.
    """

    def __init__(self) -> None:
        self._bindings: dict[ID, FactoryOf[Any]] = {}
        self._parents: list[Container] = []
        self._lock = threading.RLock()

    @property
    def parents(self) -> tuple[Container, ...]:
        with self._lock:
            return tuple(self._parents)

    def bind(self, id: ID, factory: FactoryOf[Any]) -> Container:  # noqa: A002
        """Bind a factory to an id, replacing any previous local binding.

        Example:
          container.bind("db", lambda inject: Database(inject("settings")))

        """
        if not callable(factory):
            msg = f"Factory for {id!r} must be callable, got {type(factory).__name__}"
            raise TypeError(msg)

        with self._lock:
            replaced = id in self._bindings
            self._bindings[id] = factory

        logger.debug("%s %r", "Rebound" if replaced else "Bound", id)
        return self

    def unbind(self, id: ID) -> Container:  # noqa: A002
        """Drop the local binding for an id. Parent bindings stay reachable."""
        with self._lock:
            removed = self._bindings.pop(id, None) is not None

        if removed:
            logger.debug("Unbound %r", id)
        return self

    def is_current_bound(self, id: ID) -> bool:  # noqa: A002
        with self._lock:
            return id in self._bindings

    def is_bound(self, id: ID) -> bool:  # noqa: A002
        if self.is_current_bound(id):
            return True
        return any(parent.is_bound(id) for parent in self.parents)

    @overload
    def get(self, id: Token[T]) -> T: ...  # noqa: A002

    @overload
    def get(self, id: str) -> Any: ...  # noqa: A002

    def get(self, id: ID) -> Any:  # noqa: A002
        """Resolve an id to a freshly built component.

        The factory is looked up locally first, then in each parent in order.
        Whichever container supplies it, the factory is called with this
        container's ``inject``, so its own dependencies see the local
        overrides made here.
        """
        factory = self._find_factory(id)
        if factory is None:
            logger.debug("No binding for %r in %r", id, self)
            raise BindingNotFoundError(id)

        return factory(self.inject)

    inject = get

    def extend(self, *containers: Container) -> Container:
        """Append parent containers, skipping any that are already parents."""
        for container in containers:
            if not isinstance(container, Container):
                msg = f"Can only extend with Container instances, got {type(container).__name__}"
                raise TypeError(msg)

        added = []
        with self._lock:
            for container in containers:
                if any(parent is container for parent in self._parents):
                    continue
                self._parents.append(container)
                added.append(container)

        for container in added:
            logger.debug("Extended %r with parent %r", self, container)
        return self

    def create_child(self) -> Container:
        """Create an empty container whose only parent is this one.

        Useful for per-request/per-test bindings without altering this container.
        """
        child = Container()
        child._parents.append(self)  # noqa: SLF001
        logger.debug("Created child of %r", self)
        return child

    def _find_factory(self, id: ID) -> FactoryOf[Any] | None:  # noqa: A002
        with self._lock:
            factory = self._bindings.get(id)
            parents = tuple(self._parents)

        if factory is not None:
            return factory

        # First parent that can supply the id wins.
        for parent in parents:
            factory = parent._find_factory(id)  # noqa: SLF001
            if factory is not None:
                logger.debug("Resolved %r through parent %r", id, parent)
                return factory

        return None

    def __repr__(self) -> str:
        with self._lock:
            return f"Container(bindings={len(self._bindings)}, parents={len(self._parents)})"
