"""Core layer — REST pipeline, entity models and the remote registry.

Rules
-----
* No ``print()`` calls.
* No filesystem I/O; network I/O only through an injected
  :class:`~gerlib.core.protocols.Transport`.
* No imports from ``cli``.  ``infra`` is imported lazily and only by
  the convenience constructors of :class:`~gerlib.core.api.GerritRestApi`.
"""

from gerlib.core.api import GerritRestApi
from gerlib.core.protocols import RawResponse, Transport
from gerlib.core.query import (
    IsOperator,
    LimitOperator,
    OwnerOperator,
    QueryParams,
    ReviewerOperator,
    SearchQuery,
)
from gerlib.core.remotes import Remote, RemoteRegistry
from gerlib.core.rest import MAGIC_PREFIX, Envelope, RestHandler

__all__: list[str] = [
    "MAGIC_PREFIX",
    "Envelope",
    "GerritRestApi",
    "IsOperator",
    "LimitOperator",
    "OwnerOperator",
    "QueryParams",
    "RawResponse",
    "Remote",
    "RemoteRegistry",
    "RestHandler",
    "ReviewerOperator",
    "SearchQuery",
    "Transport",
]
