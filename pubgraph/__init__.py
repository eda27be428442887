"""Publication graph toolkit.

Helpers for an academic visualization page: styled node/edge insertion
for a sigma.js-style graph (``pubgraph.graph``) and a parser, grouping,
statistics and query layer over pipe-delimited publication listings
(``pubgraph.catalog``).
"""

__version__ = "0.1.0"
