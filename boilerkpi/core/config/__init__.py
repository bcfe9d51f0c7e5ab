__all__ = [
    "LoggingSettings",
    "ReportSettings",
    "RubricSettings",
    "Settings",
    "StorageSettings",
]


from .logging import LoggingSettings
from .report import ReportSettings, RubricSettings
from .settings import Settings
from .storage import StorageSettings
