__all__ = [
    "BootConfiguration",
    "BoilerKPIContainer",
    "provide_rubric",
]

from .boilerkpi import BoilerKPIContainer, BootConfiguration, provide_rubric
