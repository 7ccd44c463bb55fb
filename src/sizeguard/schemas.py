from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional

SizeUnit = Literal["B", "KB", "MB", "GB"]


class BundleRule(BaseModel):
    """
    A size budget bound to an artifact name or a regex over artifact names.
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    max_size_in_bytes: int = Field(ge=0)
    max_size: str  # Display label, e.g. "100 KB"
    unit: SizeUnit


class BundleConfig(BaseModel):
    """
    Ordered rule set for one build. Declaration order decides precedence.
    """
    model_config = ConfigDict(frozen=True)

    bundles: List[BundleRule] = Field(default_factory=list)
    source: Optional[str] = None  # Path the config was loaded from, if any

    def names(self) -> List[str]:
        return [rule.name for rule in self.bundles]

