from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator

from directus_commons.constants.app_constants import AppConstants
from directus_commons.constants.resource_paths import ResourcePaths
from directus_commons.model.resource_model import ResourceDescriptor


def default_resource_paths() -> Dict[str, ResourceDescriptor]:
    return {
        name: ResourceDescriptor(path=path, implemented=implemented)
        for name, (path, implemented) in ResourcePaths.DEFAULTS.items()
    }


class ClientConfig(BaseModel):
    """Everything needed to talk to one API endpoint with one static token."""
    model_config = ConfigDict(frozen=True)

    base_url: str = Field(..., description="API root, e.g. https://cms.example.com")
    token: str = Field(..., description="Static access token")
    user_agent: str = Field(default=AppConstants.USER_AGENT)
    timeout: float = Field(default=AppConstants.DEFAULT_TIMEOUT, gt=0, description="Request timeout in seconds")
    resource_paths: Dict[str, ResourceDescriptor] = Field(default_factory=default_resource_paths)

    @field_validator('base_url', 'token')
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must not be empty")
        return v.strip()
