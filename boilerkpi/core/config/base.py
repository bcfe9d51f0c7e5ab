import pydantic as p

from boilerkpi.model import BaseModel


class BaseSettings(BaseModel):
    """One section of Settings, read from its own YAML file.

    Sections are plain models so their defaults never consult the process
    environment; unknown keys in a section file are an error.
    """

    model_config = p.ConfigDict(extra="forbid")
