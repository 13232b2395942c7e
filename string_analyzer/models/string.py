from pydantic import BaseModel
from typing import Dict
from datetime import datetime


class StringProperties(BaseModel):
    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int]

    class Config:
        frozen = True


class StringRecord(BaseModel):
    """An analyzed string, keyed by the SHA-256 of its normalized value"""

    id: str  # SHA-256 hash
    value: str
    properties: StringProperties
    created_at: datetime

    class Config:
        frozen = True
