"""
Fixture Config Schema v1.0
Which generators to emit fixtures for, and how many records of each kind.

Variant selection is always explicit: an empty list emits nothing.
"""
import json
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from modules.fixture_format import TypeTagStyle
from prng_registry import get_jump_variant, get_variant


DEFAULT_CONFIG = "fixture_config.json"


class FixtureConfig(BaseModel):
    """Validated fixture generation settings."""

    variants: List[str] = Field(
        default_factory=list,
        description="PRNG families to emit next-test records for"
    )

    jump_variants: List[str] = Field(
        default_factory=list,
        description="Jump-capable PRNG families to emit jump-test records for"
    )

    next_records: int = Field(default=16, ge=1, description="Records per next-test block")
    outputs_per_record: int = Field(default=16, ge=1, description="next() outputs per record")
    jump_records: int = Field(default=8, ge=1, description="Records per jump-test block")
    jumps_per_record: int = Field(default=8, ge=1, description="Jump pairs per record")

    seed: Optional[int] = Field(
        default=None,
        ge=0,
        description="Fixed seed for reproducible runs; OS entropy when absent"
    )

    type_tags: TypeTagStyle = Field(
        default=TypeTagStyle.NEUTRAL,
        description="Word-type label convention (neutral u64 or go uint64)"
    )

    @field_validator('variants')
    @classmethod
    def validate_variants(cls, v: List[str]) -> List[str]:
        """Normalize names and reject anything not in the registry."""
        names = [name.strip().lower() for name in v]
        for name in names:
            get_variant(name)
        return names

    @field_validator('jump_variants')
    @classmethod
    def validate_jump_variants(cls, v: List[str]) -> List[str]:
        """Jump fixtures need published jump constants."""
        names = [name.strip().lower() for name in v]
        for name in names:
            get_jump_variant(name)
        return names

    @classmethod
    def load(cls, config_path: str = DEFAULT_CONFIG) -> "FixtureConfig":
        """
        Load config from JSON file.

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValidationError: If config fails validation
        """
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Fixture config not found: {config_path}")

        with open(path) as f:
            data = json.load(f)

        return cls.model_validate(data)
