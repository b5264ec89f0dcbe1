"""Infrastructure layer — external system integration.

This layer wraps all interaction with the network (httpx) and the
filesystem (the YAML remote registry).  Every raw third-party exception
must be caught here and re-raised as a
:class:`~gerlib.exceptions.GerlibError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from gerlib.infra.http_transport import HttpxTransport, build_base_url
from gerlib.infra.remote_store import RemoteStore, default_config_path

__all__: list[str] = [
    "HttpxTransport",
    "RemoteStore",
    "build_base_url",
    "default_config_path",
]
