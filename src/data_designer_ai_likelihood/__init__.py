# SPDX-License-Identifier: Apache-2.0
"""AI-likelihood scoring for NeMo Data Designer.

Combines five statistical signals (trigram perplexity, sentence-length
burstiness, entropy, stylometry, and lexical-marker fingerprints) into a 0-100
AI probability with a confidence tier and verdict. No LLM calls, no model
downloads.

Usage::

    from data_designer_ai_likelihood import analyze_text

    result = analyze_text(article)
    result["verdict"], result["ai_probability"]

With Data Designer installed, the ``ai-likelihood`` column type is available::

    from data_designer_ai_likelihood.config import AILikelihoodColumnConfig

    builder.add_column(AILikelihoodColumnConfig(
        name="ai_check",
        target_columns=["article"],
        max_ai_probability=55,
    ))
"""

from data_designer_ai_likelihood.core import (
    AIDetectionEngine,
    AIDetectionResult,
    Confidence,
    ScoringWeights,
    Verdict,
    analyze_text,
)

__all__ = ["AIDetectionEngine", "AIDetectionResult", "Confidence", "ScoringWeights", "Verdict", "analyze_text"]
