from pathlib import Path
from typing import Optional

from pydantic import BaseModel, field_validator


class PipelineConfig(BaseModel):
    """Settings for one run of the housing regression analysis."""

    data_path: Path
    separator: str = ','
    feature_column: str = 'median_income'
    label_column: str = 'median_house_value'
    # rows are kept when label < max_label_value (the dataset caps values at 500,001)
    max_label_value: float = 500000
    label_divisor: float = 1000
    plot: bool = True
    plot_path: Optional[Path] = None
    wait_for_input: bool = True

    @field_validator('label_divisor')
    @classmethod
    def divisor_not_zero(cls, v):
        if v == 0:
            raise ValueError('label_divisor must be non-zero')
        return v

    @field_validator('separator')
    @classmethod
    def single_char_separator(cls, v):
        if len(v) != 1:
            raise ValueError('separator must be a single character')
        return v
