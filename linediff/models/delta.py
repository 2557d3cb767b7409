"""Delta-related data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class DeltaType(str, Enum):
    """Kinds of difference between candidate and reference"""

    INSERT = "insert"  # reference-only lines
    DELETE = "delete"  # candidate-only lines
    REPLACE = "replace"  # both sides present but differing


class EditOperation(BaseModel):
    """One contiguous run of non-matching lines"""

    model_config = ConfigDict(frozen=True)

    type: DeltaType
    anchor: int = Field(ge=1)  # 1-indexed, reference side
    candidate_lines: tuple[str, ...] = ()
    reference_lines: tuple[str, ...] = ()

    @model_validator(mode="after")
    def check_shape(self) -> "EditOperation":
        has_candidate = bool(self.candidate_lines)
        has_reference = bool(self.reference_lines)
        if self.type is DeltaType.REPLACE and not (has_candidate and has_reference):
            raise ValueError("replace needs candidate and reference lines")
        if self.type is DeltaType.INSERT and (has_candidate or not has_reference):
            raise ValueError("insert needs reference lines only")
        if self.type is DeltaType.DELETE and (has_reference or not has_candidate):
            raise ValueError("delete needs candidate lines only")
        return self


class Delta(EditOperation):
    """An edit operation together with its rendered report"""

    text: str

    def __str__(self) -> str:
        return self.text

