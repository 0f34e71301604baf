"""
Pytest configuration file for the video game similarity graph project.

This file contains shared fixtures and configuration for the test suite.
"""
import pytest
from pathlib import Path

from vgsales_graph.data_layer.records import GameRecord


SALES_HEADER = (
    "Name,Platform,Year_of_Release,Genre,Publisher,NA_Sales,EU_Sales,JP_Sales,"
    "Other_Sales,Global_Sales,Critic_Score,Critic_Count,User_Score,User_Count,Developer,Rating"
)


@pytest.fixture
def raw_csv_dir(tmp_path):
    """
    Create the raw CSV directory inside a per-test temporary directory.

    Returns:
        Path: Path to the raw CSV directory.
    """
    csv_dir = tmp_path / "data" / "raw_csv"
    csv_dir.mkdir(parents=True, exist_ok=True)
    return csv_dir


@pytest.fixture
def sales_csv(raw_csv_dir):
    """
    Create a small sales CSV in the layout of the 2016 video game sales dataset.

    Wii Sports links to Mario Kart Wii (publisher) and FIFA 16 (genre),
    Halo 3 links to Gears of War, and Lonely Puzzle stays isolated. Gears of
    War and Lonely Puzzle carry unparsable or blank scores.

    Returns:
        Path: Path to the CSV file.
    """
    content = "\n".join([
        SALES_HEADER,
        "Wii Sports,Wii,2006,Sports,Nintendo,41.36,28.96,3.77,8.45,82.53,76,51,8,322,Nintendo,E",
        "Mario Kart Wii,Wii,2008,Racing,Nintendo,15.68,12.76,3.79,3.29,35.52,82,73,8.3,709,Nintendo,E",
        "Halo 3,X360,2007,Shooter,Microsoft Game Studios,9.7,3.29,0.06,1.03,14.08,94,102,7.8,2917,Bungie,M",
        "Gears of War,X360,2006,Shooter,Microsoft Game Studios,3.54,1.94,0.07,0.53,6.08,,,tbd,,Epic Games,M",
        "FIFA 16,PS4,2015,Sports,Electronic Arts,1.11,5.93,0.05,1.11,8.2,82,42,4.3,896,EA Sports,E",
        "Lonely Puzzle,PC,2010,Puzzle,Tiny Studio,0.01,0,0,0,0.01,n/a,,,,Tiny Studio,E",
    ])
    path = raw_csv_dir / "Video_Games_Sales_as_at_22_Dec_2016.csv"
    path.write_text(content + "\n")
    return path


@pytest.fixture
def sample_records():
    """Records whose similarity edges are known in advance."""
    return [
        GameRecord("Wii Sports", "Sports", "Nintendo", 76.0, 8.0),
        GameRecord("Mario Kart Wii", "Racing", "Nintendo", 82.0, 8.3),
        GameRecord("Halo 3", "Shooter", "Microsoft Game Studios", 94.0, 7.8),
        GameRecord("Gears of War", "Shooter", "Microsoft Game Studios"),
        GameRecord("FIFA 16", "Sports", "Electronic Arts", 82.0, 4.3),
        GameRecord("Lonely Puzzle", "Puzzle", "Tiny Studio"),
    ]
