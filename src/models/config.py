"""Configuration models"""
from typing import Literal
from pydantic import BaseModel, Field, field_validator


class Config(BaseModel):
    """Application configuration"""
    input_path: str = Field(..., description="Path to a PNR JSON document")
    output_format: Literal['text', 'json'] = Field(
        default='text',
        description="Console output format"
    )

    @field_validator('output_format', mode='before')
    @classmethod
    def normalize_format(cls, v):
        """Accept format names in any case"""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @property
    def is_json_output(self) -> bool:
        """Check if the report should be printed as JSON"""
        return self.output_format == 'json'
