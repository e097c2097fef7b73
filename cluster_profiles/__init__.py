"""Cluster profiles service.

Stores named cluster-creation templates per cloud distribution and derives
default profiles from static YAML defaults.
"""

__version__ = "0.1.0"
