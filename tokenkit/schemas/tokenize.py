from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field
from tokenkit.schemas.common import BaseResponse


# Request & Response for /tokenize
class TokenizeRequest(BaseModel):
    text: str
    config: Optional[Dict[str, Any]] = None  # partial, layered over the default


class TokenizedData(BaseModel):
    tokens: List[str]
    count: int
    config: Dict[str, Any]


class TokenizedResponse(BaseResponse):
    data: TokenizedData


# Request & Response for /tokenize/batch
class BatchTokenizeRequest(BaseModel):
    texts: List[str] = Field(min_length=1)
    config: Optional[Dict[str, Any]] = None


class BatchTokenizedData(BaseModel):
    results: List[List[str]]
    count: int
    config: Dict[str, Any]


class BatchTokenizedResponse(BaseResponse):
    data: BatchTokenizedData


# Request & Response for /config
class ConfigRequest(BaseModel):
    config: Dict[str, Any]


class ConfigResponse(BaseResponse):
    data: Dict[str, Any]
