"""Setup script for the video game similarity graph project."""

from setuptools import find_packages, setup

setup(
    name="vgsales-similarity-graph",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "polars>=0.20.0",
        "kedro>=1.7.0,<1.8",
        "networkx>=3.0",
        "tqdm>=4.60.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "hypothesis>=6.0.0",
            "black>=23.0.0",
            "ruff>=0.0.265",
        ],
    },
    entry_points={
        "console_scripts": [
            "vgsales-graph=vgsales_graph.main:main",
        ],
    },
    python_requires=">=3.9",
    description="Genre and publisher similarity graph of video games",
)
