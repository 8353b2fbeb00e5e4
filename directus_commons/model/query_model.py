from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from directus_commons.utils.filter_expression import FilterExpression


class QueryOptions(BaseModel):
    """Query parameters accepted by list and read endpoints"""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    fields: Optional[List[str]] = None
    filter: Optional[FilterExpression] = None
    search: Optional[str] = None
    sort: Optional[List[str]] = Field(default=None, description="Field names, '-' prefix sorts descending")
    limit: Optional[Union[int, str]] = None
    offset: Optional[Union[int, str]] = None
    page: Optional[Union[int, str]] = None
    version: Optional[str] = Field(default=None, description="Content version key")
    meta: Optional[str] = Field(default=None, description="'total_count', 'filter_count' or '*'")
    deep: Optional[Dict[str, Any]] = None
