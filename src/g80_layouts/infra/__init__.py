"""Infrastructure layer — external system integration.

This layer wraps all interaction with the layout service and the
filesystem.  Every raw third-party exception must be caught here and
re-raised as a :class:`~g80_layouts.exceptions.G80LayoutsError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from g80_layouts.infra.cache_file import describe_cache, load_store, save_store
from g80_layouts.infra.moergo_api import MoErgoLayoutSource

__all__: list[str] = [
    "MoErgoLayoutSource",
    "describe_cache",
    "load_store",
    "save_store",
]
