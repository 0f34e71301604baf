"""
Graph analytics module for the video game similarity graph.

This module builds and analyzes the game similarity graph:
- Similarity edges: games sharing a genre or a publisher
- Breadth-first distances from a chosen game
- Degree distribution and degree centrality
"""

from .core import GraphSummary, SimilarityGraph, build_similarity_graph, summarize_graph

__all__ = ["GraphSummary", "SimilarityGraph", "build_similarity_graph", "summarize_graph"]
