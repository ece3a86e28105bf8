"""Spanning tree algorithms (Prim, Kruskal, bottleneck, incremental update) and supporting data structures."""

__version__ = "0.1.0"

__all__ = ["bottleneck", "disjoint_set", "edge_in_mst", "int_list", "prim_kruskal", "update_mst"]