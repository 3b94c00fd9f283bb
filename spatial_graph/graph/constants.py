"""
Constants shared by the graph store, analyzers and exporters.
"""

# networkx attribute keys
VERTEX_ATTR = 'vertex'
EDGE_ATTR = 'edge'
WEIGHT_ATTR = 'weight'

# Path table layout
PATH_TABLE_HEADER = ("SourceNodeID", "TargetNodeID", "PathLength", "Path")
NO_PATH_MARKER = "No path"
PATH_SEPARATOR = "->"

# Report limits
MAX_ERROR_ITEMS = 5
MAX_WARNING_ITEMS = 5
