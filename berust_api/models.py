"""
API request/response models.
"""

from typing import Dict, List

from pydantic import BaseModel, Field

from berust.translator import BlockState, TranslationResult


class TranslateRequest(BaseModel):
    """Request to translate a source"""
    source: str = Field(..., description="Toy-notation source text")


class TranslateResponse(BaseModel):
    """Translation response"""
    code: str
    lines: List[str]
    bindings: Dict[str, str] = Field(default_factory=dict)
    final_state: BlockState
    rules_applied: List[str]

    @classmethod
    def from_result(cls, result: TranslationResult) -> "TranslateResponse":
        """Convert a translation result to a response"""
        return cls(
            code=result.code,
            lines=result.lines,
            bindings=result.bindings,
            final_state=result.final_state,
            rules_applied=result.rules_applied,
        )
