#!/usr/bin/env python
"""
Run the graph analytics pipeline for the video game similarity graph.

This script executes the Kedro ``graphs`` pipeline, which reads the sales CSV,
links games sharing a genre or publisher, and reports distance and degree
statistics.

Example:
    $ python run_graphs_pipeline.py
    $ python run_graphs_pipeline.py --start-game "Tetris"
    $ python run_graphs_pipeline.py --source data/raw_csv/vgsales.csv --indexed
"""

import sys
import argparse
import logging
from pathlib import Path

# Add project root to sys.path
project_root = Path(__file__).parent.parent
sys.path.append(str(project_root))

from kedro.framework.session import KedroSession
from kedro.framework.startup import bootstrap_project

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def run_pipeline(source=None, start_game=None, indexed=False):
    """
    Run the graph analytics pipeline with optional parameter overrides.

    Args:
        source: Path to the video game sales CSV
        start_game: Game to compute breadth-first distances from
        indexed: Use genre/publisher indexes while building the graph
    """
    logger.info("Bootstrapping Kedro project")
    metadata = bootstrap_project(project_root)

    overrides = {}
    if source is not None:
        overrides["source_path"] = str(source)
    if start_game is not None:
        overrides["start_game"] = start_game
    if indexed:
        overrides["indexed"] = True

    params = {"graphs": overrides} if overrides else {}

    with KedroSession.create(project_path=project_root, runtime_params=params) as session:
        logger.info(f"Running graphs pipeline for {metadata.package_name}")
        session.run(pipeline_name="graphs")

    logger.info("Graph analytics pipeline completed successfully")


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Run the video game similarity graph pipeline"
    )

    parser.add_argument(
        "--source",
        type=Path,
        help="Path to the video game sales CSV"
    )

    parser.add_argument(
        "--start-game",
        help="Game to compute breadth-first distances from"
    )

    parser.add_argument(
        "--indexed",
        action="store_true",
        help="Use genre/publisher indexes while building the graph"
    )

    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()
    run_pipeline(
        source=args.source,
        start_game=args.start_game,
        indexed=args.indexed
    )
