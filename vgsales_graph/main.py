"""
Main entry point for building the game similarity graph from a sales CSV.

Example:
    $ python -m vgsales_graph.main
    $ python -m vgsales_graph.main --source data/raw_csv/vgsales.csv --start-game "Tetris"
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from vgsales_graph.data_layer.records import MalformedRowError, load_game_records
from vgsales_graph.graphs.core import build_similarity_graph, summarize_graph
from vgsales_graph.settings import DEFAULT_SOURCE_PATH, DEFAULT_START_GAME

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Build a genre/publisher similarity graph of video games"
    )

    parser.add_argument(
        "--source",
        type=Path,
        default=DEFAULT_SOURCE_PATH,
        help="Path to the video game sales CSV",
    )

    parser.add_argument(
        "--start-game",
        default=DEFAULT_START_GAME,
        help="Game to compute breadth-first distances from",
    )

    parser.add_argument(
        "--indexed",
        action="store_true",
        help="Find similar games through genre/publisher indexes instead of pairwise comparison",
    )

    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar while building the graph",
    )

    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Build the graph and print its summary.

    Returns:
        int: Process exit status
    """
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    try:
        records = load_game_records(args.source)
        graph = build_similarity_graph(records, indexed=args.indexed, show_progress=args.progress)
    except (FileNotFoundError, MalformedRowError) as e:
        logger.error(f"Could not build graph: {e}")
        return 1

    summary = summarize_graph(graph, args.start_game)
    if summary.start_found:
        print(f"Max distance from {summary.start_game}: {summary.max_distance}")

    print(
        f"Degree distribution summary: Total degrees: {summary.node_count}, "
        f"Max degree: {summary.max_degree}"
    )

    if summary.most_central_game is not None:
        print(f"Most central game is {summary.most_central_game} with degree {summary.most_central_degree}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
