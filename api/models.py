from pydantic import BaseModel


class Pet3(BaseModel):
    id: int


class APIError(BaseModel):
    error_code: int
    error_message: str
