"""buildingify: street-side building units for synthetic city maps."""

__version__ = "0.1.0"

from .config import BuildingifyConfig
from .runner import BuildingifyResult, buildingify

__all__ = ["__version__", "BuildingifyConfig", "BuildingifyResult", "buildingify"]
