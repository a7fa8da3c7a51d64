from dataclasses import dataclass
from pathlib import Path

_SEED_DIR = Path(__file__).resolve().parent.parent / "data" / "seed"


@dataclass(frozen=True)
class IngestionConfig:
    """
    Configuration for loading the seed recipe collection.
    """

    seed_data_dir: Path = _SEED_DIR
    recipes_filename: str = "recipes.csv"
    ingredients_filename: str = "ingredients.csv"

    @property
    def recipes_path(self) -> Path:
        return self.seed_data_dir / self.recipes_filename

    @property
    def ingredients_path(self) -> Path:
        return self.seed_data_dir / self.ingredients_filename


DEFAULT_INGESTION_CONFIG = IngestionConfig()
