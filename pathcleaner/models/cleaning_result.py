"""
Cleaning Result Model
=====================
Pydantic model for the outcome of one path-cleaning request.

Fields:
    clean_path      — absolute, standardized path; None means "not a path"
    line_number     — line locator text exactly as it appeared (e.g. "010")
    column_number   — column locator text; only ever set together with line_number

Locator values are kept as their original text. No numeric parsing happens
here, so leading zeros survive the round trip to the caller.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, model_validator


class CleaningResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    clean_path: Optional[str] = None
    line_number: Optional[str] = None
    column_number: Optional[str] = None

    @model_validator(mode="after")
    def _column_requires_line(self) -> "CleaningResult":
        if self.column_number is not None and self.line_number is None:
            raise ValueError("column_number requires line_number")
        return self

    @property
    def succeeded(self) -> bool:
        return self.clean_path is not None

    @classmethod
    def failure(cls) -> "CleaningResult":
        return cls()
