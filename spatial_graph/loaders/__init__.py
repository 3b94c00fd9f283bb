"""
Record loaders feeding the graph builder.
"""

from .record_loader import RecordLoader, load_node_records, load_edge_records

__all__ = [
    'RecordLoader',
    'load_node_records',
    'load_edge_records',
]
