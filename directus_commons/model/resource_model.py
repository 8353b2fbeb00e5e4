from pydantic import BaseModel, ConfigDict, Field, field_validator


class ResourceDescriptor(BaseModel):
    """URL segment of one logical resource and whether this client supports it"""
    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Resource path segment, e.g. 'items' or 'files'")
    implemented: bool = Field(default=True, description="False only emits a warning when the resource is used")

    @field_validator('path')
    @classmethod
    def validate_path(cls, v: str) -> str:
        v = v.strip().strip('/')
        if not v:
            raise ValueError("Resource path must not be empty")
        return v
