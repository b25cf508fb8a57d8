# worldnav/config.py
"""
Runtime configuration: where the game keeps its city database and rankings.
"""
import os
from dataclasses import dataclass, field

DEFAULT_DATA_DIR = os.path.join(os.path.expanduser("~"), ".worldnav")

@dataclass
class GameConfig:
    """Storage locations and seeding behaviour for one game process."""
    data_dir: str = field(default_factory=lambda: DEFAULT_DATA_DIR)
    database_filename: str = "WorldNavigationGame.sqlite"
    rankings_key: str = "WorldNavigationPlayers"
    seed_sample_cities: bool = True

    @property
    def database_path(self) -> str:
        return os.path.join(self.data_dir, self.database_filename)

    def ensure_data_dir(self) -> str:
        if not os.path.exists(self.data_dir):
            os.makedirs(self.data_dir, exist_ok=True)
        return self.data_dir
