"""g80-layouts — browse layouts shared on the Glove80 layout service.

Fetched layout metadata is cached on disk and near-identical layouts
are collapsed before being rendered as a table.
"""

from g80_layouts.version import __version__

__all__: list[str] = ["__version__"]
