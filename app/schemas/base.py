from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error body shared by every endpoint."""
    statusCode: int
    message: Union[str, list[str]]
    error: str
    error_code: str
    request_id: Optional[str] = None
    timestamp: datetime
