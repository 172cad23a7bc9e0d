from pydantic import BaseModel, Field

import config
from models import ObfuscatedID


class EncodeRequest(BaseModel):
    """Schema for an incoming raw ID to obfuscate."""
    value: int = Field(..., ge=0, le=config.MAX_INT)


class EncodeResponse(BaseModel):
    """Schema for an obfuscated ID, as text and as the raw obfuscated integer."""
    id: ObfuscatedID
    encoded: int


class DecodeRawRequest(BaseModel):
    """Schema for an obfuscated 64-bit integer to resolve back into a raw ID."""
    encoded: int = Field(..., ge=0, le=config.UINT64_MASK)


class DecodeResponse(BaseModel):
    id: ObfuscatedID
    value: int


class ErrorResponse(BaseModel):
    detail: str
