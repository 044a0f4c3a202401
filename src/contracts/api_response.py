from typing import Any, Dict, List

from pydantic import BaseModel, Field, field_validator


class QueryResult(BaseModel):
    """
    One series of an instant-vector result.
    """

    metric: Dict[str, str] = Field(default_factory=dict)
    value: List[Any]

    @field_validator("value")
    @classmethod
    def _timestamp_and_value(cls, v):
        if len(v) < 2:
            raise ValueError("expected [timestamp, value] pair")
        return v

    def sample_value(self) -> str:
        """
        Return the sample value as an opaque string.
        """
        raw = self.value[1]
        return raw if isinstance(raw, str) else str(raw)


class QueryData(BaseModel):
    resultType: str = ""
    result: List[QueryResult] = Field(default_factory=list)


class ApiResponse(BaseModel):
    """
    Data model of the query API JSON envelope.
    """

    status: str = ""
    data: QueryData = Field(default_factory=QueryData)
