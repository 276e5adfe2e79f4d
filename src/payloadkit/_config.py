from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ClientConfig(BaseModel):
    """Settings for the ``httpx.Client`` a :class:`RequestService` sends with."""

    model_config = ConfigDict(frozen=True)

    base_url: Optional[str] = None
    headers: dict[str, str] = Field(default_factory=dict)
    timeout: Union[int, float, None] = 30.0
    verify: bool = True
    follow_redirects: bool = False
