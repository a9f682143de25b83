from .loader import load_config
from .models import (
    DummyFilesConfig,
    FlattenConfig,
    MarkerConfig,
    ReportConfig,
)

__all__ = [
    "DummyFilesConfig",
    "FlattenConfig",
    "MarkerConfig",
    "ReportConfig",
    "load_config",
]
