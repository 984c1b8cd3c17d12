"""DSG - Dynamic Scene Graph.

A typed scene graph of rooms, places and objects that keeps its
containment edges consistent with scene geometry.
"""

__version__ = "0.1.0"
