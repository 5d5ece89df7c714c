from pydantic import BaseModel, ConfigDict


class ErrorResponse(BaseModel):
    """Error body returned for rejected requests."""
    statusCode: int
    statusMessage: str
    message: str

    model_config = ConfigDict(frozen=True, extra="forbid")
