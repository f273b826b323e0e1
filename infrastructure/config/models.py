"""Configuration models (Pydantic classes)."""

from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from infrastructure.constants import OUTPUT_DIR, TAXONOMY_FILE


class MatchConfig(BaseModel):
    """Fuzzy matcher tuning."""

    threshold: float = Field(default=0.3, description="Results must score strictly above this similarity.")
    limit: int = Field(default=10, description="Maximum number of matches returned per query.")

    @model_validator(mode="after")
    def _validate(self) -> "MatchConfig":
        if not 0.0 <= self.threshold < 1.0:
            raise ValueError(f"match.threshold must be in [0, 1), got {self.threshold}")
        if self.limit < 1:
            raise ValueError(f"match.limit must be >= 1, got {self.limit}")
        return self


class ValidationConfig(BaseModel):
    """Length limits used by product listing validation (Google Merchant recommendations)."""

    min_title_length: int = 10
    max_title_length: int = 150
    min_description_length: int = 50

    @model_validator(mode="after")
    def _validate(self) -> "ValidationConfig":
        if self.min_title_length > self.max_title_length:
            raise ValueError("validation.min_title_length must not exceed validation.max_title_length")
        return self


class AppConfig(BaseModel):
    """
    Runtime configuration.
    - Loaded from settings.yaml (optional)
    - Environment overrides applied by the configuration loader
    - Consumed by the session, exporters and CLI
    """

    taxonomy_file: Path = Field(
        default_factory=lambda: TAXONOMY_FILE,
        description="Path to the ' > '-delimited taxonomy catalog.",
    )
    output_dir: Path = Field(
        default_factory=lambda: OUTPUT_DIR,
        description="Directory where exports and batch results are written.",
    )
    fallback_taxonomy_version: str = Field(
        default="2021-09-21",
        description="Version reported when the catalog carries no version comment.",
    )
    match: MatchConfig = Field(default_factory=MatchConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
