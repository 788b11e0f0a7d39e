from pydantic import BaseModel, Field

__all__ = [
    'ShortenRequestDto',
    'ShortenResponseDto'
]

class ShortenRequestDto(BaseModel):
    url: str = Field(min_length=1)


class ShortenResponseDto(BaseModel):
    id: str
    url: str
