from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from data_designer.engine.column_generators.generators.base import ColumnGeneratorFullColumn

from data_designer_ai_likelihood.config import AILikelihoodColumnConfig
from data_designer_ai_likelihood.core import AIDetectionEngine, get_engine

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)


def join_row_text(values: Iterable[object]) -> str:
    return " ".join(str(v) for v in values if v is not None)


def score_row(text: str, config: AILikelihoodColumnConfig, engine: AIDetectionEngine) -> dict:
    """Build the per-row output dict for one piece of text."""
    result = engine.analyze(text)
    output: dict = {
        "is_valid": result.ai_probability < config.max_ai_probability,
        "ai_probability": result.ai_probability,
        "human_probability": result.human_probability,
        "verdict": result.verdict.value,
        "confidence": result.confidence.value,
        "scores": {name: s.value for name, s in result.scores.items()},
        "word_count": result.word_count,
    }
    if config.include_recommendations:
        output["recommendations"] = list(result.recommendations)
    if config.include_metrics:
        output["details"] = result.details.to_payload()
        output["metrics"] = result.metrics.to_payload()
    return output


class AILikelihoodColumnGenerator(ColumnGeneratorFullColumn[AILikelihoodColumnConfig]):
    """Column generator that scores text for AI likelihood via statistical extractors."""

    def generate(self, data: pd.DataFrame) -> pd.DataFrame:
        logger.info(f"\U0001f50e Scoring column {self.config.name!r} for AI likelihood")
        logger.info(f"   target columns: {self.config.target_columns}")
        logger.info(f"   max_ai_probability: {self.config.max_ai_probability}")

        engine = get_engine(self.config.scoring_weights)
        results = [
            score_row(join_row_text(row.values), self.config, engine)
            for _, row in data[self.config.target_columns].iterrows()
        ]

        data = data.copy()
        data[self.config.name] = results
        return data
