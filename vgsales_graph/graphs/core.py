"""
Core graph analytics functionality for the video game similarity graph.

This module provides:
1. The ``SimilarityGraph`` engine linking games that share a genre or a publisher
2. Incremental graph construction from a stream of game records
3. Breadth-first distances, degree distribution and degree centrality
"""

import logging
from collections import Counter, defaultdict
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, Iterator, List, Optional, Set, Tuple

import networkx as nx
from tqdm import tqdm

from vgsales_graph.data_layer.records import GameRecord

logger = logging.getLogger(__name__)


class SimilarityGraph:
    """
    Undirected graph of games connected by a shared genre or publisher.

    Nodes are game names. An edge (A, B) is created when B is inserted after A
    and the two records have the same genre or the same publisher. Edges are
    never removed.

    Args:
        indexed: Look up candidate neighbours through genre/publisher indexes
            instead of comparing against every previously inserted game.
            Both modes produce the same edge set.
    """

    def __init__(self, indexed: bool = False):
        self.indexed = indexed
        self._graph = nx.Graph()
        # name -> (genre, publisher), in insertion order
        self._attributes: Dict[str, Tuple[str, str]] = {}
        self._by_genre: Dict[str, Set[str]] = defaultdict(set)
        self._by_publisher: Dict[str, Set[str]] = defaultdict(set)

    def __contains__(self, name: object) -> bool:
        return name in self._graph

    def __len__(self) -> int:
        return self._graph.number_of_nodes()

    def __repr__(self) -> str:
        return (
            f"SimilarityGraph(|V|={self.number_of_nodes()}, "
            f"|E|={self.number_of_edges()}, indexed={self.indexed})"
        )

    def insert(self, record: GameRecord) -> None:
        """
        Add a game and link it to every earlier game with the same genre or publisher.

        Re-inserting a known name updates its genre and publisher in place and
        links it to the games matching the new values. Edges created earlier
        are kept.

        Args:
            record: Game record to insert
        """
        name = record.name
        self._graph.add_node(name)

        previous = self._attributes.get(name)
        if previous is not None and self.indexed:
            self._by_genre[previous[0]].discard(name)
            self._by_publisher[previous[1]].discard(name)
        self._attributes[name] = (record.genre, record.publisher)

        for other in self._similar_to(name, record.genre, record.publisher):
            self.add_edge(name, other)

        if self.indexed:
            self._by_genre[record.genre].add(name)
            self._by_publisher[record.publisher].add(name)

    def _similar_to(self, name: str, genre: str, publisher: str) -> Iterator[str]:
        if self.indexed:
            candidates = self._by_genre.get(genre, set()) | self._by_publisher.get(publisher, set())
            candidates.discard(name)
            yield from candidates
            return

        for other, (other_genre, other_publisher) in self._attributes.items():
            if other == name:
                continue
            if other_genre == genre or other_publisher == publisher:
                yield other

    def add_edge(self, game1: str, game2: str) -> None:
        """
        Link two games in both directions, creating missing nodes.

        A game is never linked to itself.
        """
        if game1 == game2:
            self._graph.add_node(game1)
            return
        self._graph.add_edge(game1, game2)

    def has_node(self, name: str) -> bool:
        """Return True if ``name`` is a node of the graph."""
        return self._graph.has_node(name)

    def nodes(self) -> List[str]:
        return list(self._graph.nodes)

    def edges(self) -> Set[frozenset]:
        """Return every edge as an unordered pair of game names."""
        return {frozenset(edge) for edge in self._graph.edges}

    def neighbors(self, name: str) -> Set[str]:
        """Return the games adjacent to ``name`` (empty if unknown)."""
        if name not in self._graph:
            return set()
        return set(self._graph.adj[name])

    def number_of_nodes(self) -> int:
        return self._graph.number_of_nodes()

    def number_of_edges(self) -> int:
        return self._graph.number_of_edges()

    def distances_from(self, start: str) -> Dict[str, int]:
        """
        Compute shortest edge-count distances from a game with breadth-first search.

        Args:
            start: Name of the game to start from

        Returns:
            Dict[str, int]: Distance of every reachable game, including ``start``
            at distance 0. Empty if ``start`` is not in the graph.
        """
        if start not in self._graph:
            return {}
        return dict(nx.single_source_shortest_path_length(self._graph, start))

    def degree_distribution(self) -> Dict[int, int]:
        """
        Count how many games have each degree.

        Returns:
            Dict[int, int]: Mapping of degree to number of games with that degree
        """
        return dict(Counter(degree for _, degree in self._graph.degree()))

    def degree_centrality(self) -> Dict[str, int]:
        """
        Return the degree (number of distinct neighbours) of every game.

        Unlike ``nx.degree_centrality`` the values are raw neighbour counts.
        """
        return dict(self._graph.degree())

    def most_central_node(self) -> Optional[Tuple[str, int]]:
        """
        Return the game with the highest degree and that degree.

        Ties go to the lexicographically smallest name. ``None`` for an empty graph.
        """
        centrality = self.degree_centrality()
        if not centrality:
            return None
        return min(centrality.items(), key=lambda item: (-item[1], item[0]))


@dataclass(frozen=True)
class GraphSummary:
    """Headline statistics reported after a build."""
    start_game: str
    start_found: bool
    max_distance: Optional[int]
    reachable: int
    node_count: int
    edge_count: int
    max_degree: int
    most_central_game: Optional[str]
    most_central_degree: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def build_similarity_graph(
    records: Iterable[GameRecord],
    indexed: bool = False,
    show_progress: bool = False,
) -> SimilarityGraph:
    """
    Build a similarity graph by inserting records in arrival order.

    Args:
        records: Game records, consumed once
        indexed: Use genre/publisher indexes instead of pairwise comparison
        show_progress: Display a tqdm progress bar

    Returns:
        SimilarityGraph: The fully built graph
    """
    mode = "indexed" if indexed else "pairwise"
    logger.info(f"Building similarity graph ({mode} comparison)")
    graph = SimilarityGraph(indexed=indexed)

    inserted = 0
    for record in tqdm(records, desc="Inserting games", unit="game", disable=not show_progress):
        graph.insert(record)
        inserted += 1

    logger.info(
        f"Similarity graph: {inserted:,} records, "
        f"|V|={graph.number_of_nodes():,}, |E|={graph.number_of_edges():,}"
    )
    return graph


def summarize_graph(graph: SimilarityGraph, start_game: str) -> GraphSummary:
    """
    Compute the headline statistics of a built graph.

    Args:
        graph: Graph to analyze
        start_game: Game to measure breadth-first distances from

    Returns:
        GraphSummary: Distances, degree and centrality summary
    """
    start_found = graph.has_node(start_game)
    if start_found:
        distances = graph.distances_from(start_game)
        max_distance = max(distances.values())
        logger.info(f"Max distance from {start_game}: {max_distance}")
    else:
        distances = {}
        max_distance = None
        logger.warning(f"Start game not found in graph: {start_game}")

    distribution = graph.degree_distribution()
    most_central = graph.most_central_node()
    most_central_game, most_central_degree = most_central if most_central else (None, 0)

    return GraphSummary(
        start_game=start_game,
        start_found=start_found,
        max_distance=max_distance,
        reachable=len(distances),
        node_count=sum(distribution.values()),
        edge_count=graph.number_of_edges(),
        max_degree=max(distribution, default=0),
        most_central_game=most_central_game,
        most_central_degree=most_central_degree,
    )
