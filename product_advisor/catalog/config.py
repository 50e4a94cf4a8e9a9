from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CatalogConfig:
    """
    Location of the static product catalog.
    """

    data_dir: Path = Path(__file__).resolve().parent.parent / "data"
    catalog_filename: str = "catalog.json"

    @property
    def catalog_path(self) -> Path:
        return self.data_dir / self.catalog_filename


DEFAULT_CATALOG_CONFIG = CatalogConfig()
