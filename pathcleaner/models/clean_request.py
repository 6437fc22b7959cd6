"""
Clean Request Model
===================
HTTP request body for POST /clean-path.

Fields:
    token               — raw text fragment believed to reference a path
    suffix              — text that followed the token in the terminal output
    working_directory   — absolute directory used to anchor relative tokens
"""
import os
from pydantic import BaseModel, field_validator


class CleanPathRequest(BaseModel):
    token: str
    suffix: str = ""
    working_directory: str

    @field_validator("working_directory")
    @classmethod
    def validate_absolute(cls, v: str) -> str:
        if not os.path.isabs(v):
            raise ValueError("working_directory must be an absolute path")
        return v
