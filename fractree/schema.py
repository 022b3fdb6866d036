"""
Validated input for tree parameters.

The generator accepts any TreeConfig without checks. Hosts that take
parameters from users (forms, files, the command line) validate them here
first, with the same ranges the original parameter form enforced.
"""

import json
import math
from pathlib import Path

from pydantic import BaseModel, Field

from fractree.config import Point, TreeConfig

HEX_COLOR = r"^#[0-9a-fA-F]{6}$"


class PointSchema(BaseModel):
    """Root position; origin at the bottom-center of the canvas."""

    x: float = Field(default=0.0, description="Horizontal offset from center")
    y: float = Field(default=0.0, ge=0.0, description="Height above the bottom edge")


class TreeConfigSchema(BaseModel):
    """Input schema for a fractal tree."""

    root_position: PointSchema = Field(
        default_factory=PointSchema, description="Where the trunk starts"
    )
    main_branch_height: float = Field(
        default=300.0, ge=0.0, description="Trunk length in pixels"
    )
    main_branch_thickness: float = Field(
        default=100.0, ge=0.0, description="Trunk line width in pixels"
    )
    angle_delta: float = Field(
        default=math.pi / 4, description="Rotation of each child branch (radians)"
    )
    branch_length_decrease_ratio: float = Field(
        default=0.1, ge=0.0, le=1.0, description="Fraction of length lost per level"
    )
    branch_thickness_decrease_ratio: float = Field(
        default=0.3, ge=0.0, le=1.0, description="Fraction of width lost per level"
    )
    random: bool = Field(default=True, description="Jitter child angles")
    has_flower: bool = Field(default=True, description="Draw flowers on leaves")
    flower_color: str = Field(default="#27b027", pattern=HEX_COLOR)
    branch_color: str = Field(default="#1e2202", pattern=HEX_COLOR)
    background_color: str = Field(default="#ffffff", pattern=HEX_COLOR)

    def to_config(self) -> TreeConfig:
        """Convert to the generator's config type."""
        data = self.model_dump()
        root = data.pop("root_position")
        return TreeConfig(root_position=Point(root["x"], root["y"]), **data)

    @classmethod
    def from_config(cls, config: TreeConfig) -> "TreeConfigSchema":
        data = {
            name: getattr(config, name)
            for name in cls.model_fields
            if name != "root_position"
        }
        root = config.root_position
        return cls(root_position=PointSchema(x=root.x, y=root.y), **data)


def load_config(path: str | Path, base: TreeConfig | None = None) -> TreeConfig:
    """
    Load and validate tree parameters from a JSON file.

    Keys missing from the file keep their value from `base` (or the schema
    defaults when no base is given).

    Raises:
        OSError: The file cannot be read
        ValueError: The file is not a JSON object
        pydantic.ValidationError: A value is malformed or out of range
    """
    with open(path) as f:
        overrides = json.load(f)

    if not isinstance(overrides, dict):
        raise ValueError(f"{path}: expected a JSON object, got {type(overrides).__name__}")

    if base is None:
        return TreeConfigSchema.model_validate(overrides).to_config()

    merged = TreeConfigSchema.from_config(base).model_dump()
    root = overrides.pop("root_position", {})
    if isinstance(root, dict):
        merged["root_position"] = {**merged["root_position"], **root}
    else:
        # Left for validation to reject
        merged["root_position"] = root
    merged.update(overrides)
    return TreeConfigSchema.model_validate(merged).to_config()
