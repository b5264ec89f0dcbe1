"""gerlib — typed client for the Gerrit code-review REST API.

The library never configures logging itself; it only attaches a
``NullHandler`` to the ``gerlib`` logger so applications decide where
records go.
"""

import logging

from gerlib.core.api import GerritRestApi
from gerlib.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = ["GerritRestApi", "__version__"]
