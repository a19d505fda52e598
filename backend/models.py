from pydantic import BaseModel, StrictInt

"""
Pydantic models for request/response validation
"""


class HealthResponse(BaseModel):
    status: str
    version: str


class CodeRequest(BaseModel):
    """Submission as sent by the client"""
    # Free-form so unknown languages get the runner's own 400, not a 422
    language: str
    source_code: str
    input: str = ""
    # Strict so JSON booleans and numeric strings are rejected
    time_limit: StrictInt


class CodeResponse(BaseModel):
    status: str
    message: str
