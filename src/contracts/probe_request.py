from typing import Optional

from pydantic import BaseModel, ConfigDict


class ProbeRequest(BaseModel):
    """
    Data model describing one probe run against the query API.
    """

    model_config = ConfigDict(frozen=True)

    url: str
    instance: str = "default"
    tags: str = ""
    timeout_warning: float = 5.0
    timeout_critical: float = 30.0
    request_timeout: Optional[float] = None
