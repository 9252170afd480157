"""Tiny inversion-of-control container.

This package maps opaque identifiers to factory functions and resolves them on
demand. Containers can be layered: lookups fall back to any number of parent
containers, and disposable child containers hold temporary bindings.

Exports:
- `Container`: Binding table with bind/unbind/get, parent chaining via `extend`
  and scoped children via `create_child`.
- `Token`: Unique opaque identifier, an alternative to plain string ids.
- `BindingNotFoundError`: Raised when an id cannot be resolved anywhere.
- `ID`, `Inject`, `FactoryOf`: Type aliases for ids, the inject callable and
  factories.
"""

from ._container import BindingNotFoundError, Container
from ._token import ID, FactoryOf, Inject, Token


__all__ = ["ID", "BindingNotFoundError", "Container", "FactoryOf", "Inject", "Token"]
