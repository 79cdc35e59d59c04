"""
FARS Reports Package (Imperative Shell)

Orchestrates data loading, plot generation, and HTML output.
No analysis logic lives here; this package calls the functional core
(src/fars/analysis/) and plotting (src/fars/plotting/) via the data
reader (src/fars/data/reader.py).

Modules:
    generators: map_state() and build_state_map() for single-state
                accident maps.
"""

from .generators import (
    build_state_map,
    map_state,
)

__all__ = [
    'build_state_map',
    'map_state',
]
