"""
Pipeline node function definitions for graph analytics.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List

from kedro.pipeline import Pipeline, node

from vgsales_graph.data_layer.records import GameRecord, load_game_records
from vgsales_graph.graphs.core import (
    SimilarityGraph,
    build_similarity_graph,
    summarize_graph,
)
from vgsales_graph.settings import DEFAULT_SOURCE_PATH, DEFAULT_START_GAME


logger = logging.getLogger(__name__)


def load_game_records_node(params: Dict[str, Any]) -> List[GameRecord]:
    """
    Node function for reading game records from the sales CSV.

    Args:
        params: Pipeline parameters

    Returns:
        List[GameRecord]: Records in file order
    """
    source_path = Path(params.get("source_path", DEFAULT_SOURCE_PATH))
    return list(load_game_records(source_path, columns=params.get("columns")))


def build_similarity_graph_node(records: List[GameRecord], params: Dict[str, Any]) -> SimilarityGraph:
    """
    Node function for building the similarity graph.

    Args:
        records: Game records in arrival order
        params: Pipeline parameters

    Returns:
        SimilarityGraph: The built graph
    """
    return build_similarity_graph(
        records,
        indexed=params.get("indexed", False),
        show_progress=params.get("show_progress", False),
    )


def compute_graph_metrics_node(graph: SimilarityGraph, params: Dict[str, Any]) -> Dict[str, Any]:
    """
    Node function for computing distance, degree and centrality metrics.

    Args:
        graph: The built similarity graph
        params: Pipeline parameters

    Returns:
        Dict[str, Any]: Graph summary plus the full degree distribution
    """
    start_game = params.get("start_game", DEFAULT_START_GAME)
    metrics = summarize_graph(graph, start_game).to_dict()
    metrics["degree_distribution"] = graph.degree_distribution()

    logger.info(
        f"Degree distribution summary: Total degrees: {metrics['node_count']}, "
        f"Max degree: {metrics['max_degree']}"
    )
    if metrics["most_central_game"] is not None:
        logger.info(
            f"Most central game is {metrics['most_central_game']} "
            f"with degree {metrics['most_central_degree']}"
        )
    return metrics


def create_pipeline(**kwargs) -> Pipeline:
    """Create the graph analytics pipeline."""
    return Pipeline(
        [
            node(
                load_game_records_node,
                inputs="params:graphs",
                outputs="game_records",
                name="load_game_records",
            ),
            node(
                build_similarity_graph_node,
                inputs=["game_records", "params:graphs"],
                outputs="similarity_graph",
                name="build_similarity_graph",
            ),
            node(
                compute_graph_metrics_node,
                inputs=["similarity_graph", "params:graphs"],
                outputs="graph_metrics",
                name="compute_graph_metrics",
            ),
        ]
    )
