from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RankingWeights:
    """
    Additive score contributions used by the ranking engine.

    The magnitudes are tuned so that a disliked cuisine outweighs an area
    match, which in turn outweighs every vibe, cuisine and budget signal.
    """

    dislike_penalty: int = 500000
    area_boost: int = 100000

    lunch_cutoff_minutes: int = 870  # 14:30
    lunch_boost: int = 5000
    lunch_penalty: int = 10000

    romantic_threshold: int = 8
    romantic_boost: int = 8000
    romantic_factor: int = 100

    party_threshold: int = 4
    party_boost: int = 8000
    party_factor: int = 500

    instagram_factor: int = 500

    cuisine_boost: int = 2000
    budget_boost: int = 500
    budget_penalty: int = 200
    rating_factor: int = 20

    max_reasons: int = 2
    suggestion_limit: int = 5

    @property
    def area_penalty(self) -> int:
        return self.area_boost // 2


DEFAULT_RANKING_WEIGHTS = RankingWeights()
