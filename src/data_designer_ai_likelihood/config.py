from __future__ import annotations

from typing import Literal

from pydantic import Field

from data_designer.config.column_configs import SingleColumnConfig

from data_designer_ai_likelihood.core import DEFAULT_WEIGHTS, ScoringWeights


class AILikelihoodColumnConfig(SingleColumnConfig):
    """Score text columns for AI likelihood using statistical signal extractors.

    Combines predictability, sentence-length dispersion, entropy, stylometry, and
    lexical-marker sub-scores into an AI probability (0-100), a confidence tier,
    and a seven-way verdict per row.

    Attributes:
        target_columns: Columns whose text content will be concatenated and scored.
        max_ai_probability: Rows scoring below this AI probability are ``is_valid=True``.
            Defaults to 55 (the lower edge of "Possibly AI").
        include_recommendations: Include rewrite recommendations in output.
        include_metrics: Include raw extractor metrics and verdict details in output.
        predictability_weight: Weight of the perplexity sub-score.
        dispersion_weight: Weight of the sentence-length variation sub-score.
        entropy_weight: Weight of the information-density sub-score.
        stylometry_weight: Weight of the stylometric sub-score.
        fingerprint_weight: Weight of the lexical-marker sub-score.
    """

    target_columns: list[str]
    max_ai_probability: int = Field(default=55, ge=0, le=100, description="AI probability below which is_valid=True")
    include_recommendations: bool = Field(default=True, description="Include recommendation strings in output")
    include_metrics: bool = Field(default=False, description="Include raw metrics and details in output")
    predictability_weight: float = Field(default=DEFAULT_WEIGHTS.predictability, ge=0)
    dispersion_weight: float = Field(default=DEFAULT_WEIGHTS.dispersion, ge=0)
    entropy_weight: float = Field(default=DEFAULT_WEIGHTS.entropy, ge=0)
    stylometry_weight: float = Field(default=DEFAULT_WEIGHTS.stylometry, ge=0)
    fingerprint_weight: float = Field(default=DEFAULT_WEIGHTS.fingerprint, ge=0)
    column_type: Literal["ai-likelihood"] = "ai-likelihood"

    @staticmethod
    def get_column_emoji() -> str:
        return "\U0001f50e"

    @property
    def required_columns(self) -> list[str]:
        return self.target_columns

    @property
    def side_effect_columns(self) -> list[str]:
        return []

    @property
    def scoring_weights(self) -> ScoringWeights:
        return ScoringWeights(
            predictability=self.predictability_weight,
            dispersion=self.dispersion_weight,
            entropy=self.entropy_weight,
            stylometry=self.stylometry_weight,
            fingerprint=self.fingerprint_weight,
        )
