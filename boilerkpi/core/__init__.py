__all__ = [
    "BootConfiguration",
    "di",
    "BoilerKPIContainer",
    "LoggingProvider",
    "Settings",
]


from . import di
from .config import Settings
from .container import BoilerKPIContainer, BootConfiguration
from .provider import LoggingProvider
