"""Project settings."""

from pathlib import Path

# This is the location of the project configuration directory
CONF_SOURCE = "conf"

# The location of the project root directory.
PROJECT_ROOT = Path(__file__).parents[1]  # Going up from vgsales_graph to the project root

# Defaults used when a parameter is not supplied
DEFAULT_SOURCE_PATH = Path("data/raw_csv/Video_Games_Sales_as_at_22_Dec_2016.csv")
DEFAULT_START_GAME = "The Legend of Zelda: Breath of the Wild"

# Record field -> CSV column in Video_Games_Sales_as_at_22_Dec_2016.csv
DEFAULT_COLUMNS = {
    "name": "Name",
    "genre": "Genre",
    "publisher": "Publisher",
    "critic_score": "Critic_Score",
    "user_score": "User_Score",
}
