# Path: sched_match/process/matcher/scoring/confidence.py
"""
Confidence Calculator

Maps a final score to a confidence tier.
"""

from ..models.match_result import Confidence
from ..models.rule_config import Thresholds


class ConfidenceCalculator:
    """
    Calculates the confidence tier of a valid result.

    Confidence levels:
    - HIGH: score >= high_confidence_score
    - MEDIUM: score >= medium_confidence_score
    - LOW: anything else that survived the minimum score

    NONE is reserved for decisions without a valid result.
    """

    def __init__(self, thresholds: Thresholds):
        self.thresholds = thresholds

    def calculate(self, score: int) -> Confidence:
        """
        Calculate confidence level.

        Args:
            score: Final score of the best valid result

        Returns:
            Confidence tier
        """
        if score >= self.thresholds.high_confidence_score:
            return Confidence.HIGH
        if score >= self.thresholds.medium_confidence_score:
            return Confidence.MEDIUM
        return Confidence.LOW


__all__ = ['ConfidenceCalculator']
