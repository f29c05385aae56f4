from pydantic import BaseModel, ConfigDict, Field


class InvalidConfigurationError(ValueError):
    """Raised when an advertizer is built from an unusable configuration."""


class AdvertizerConfig(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    # An item is dropped right after its max_advertisements-th emission.
    max_advertisements: int = Field(ge=1)
