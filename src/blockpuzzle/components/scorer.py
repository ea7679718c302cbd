from dataclasses import dataclass


@dataclass(slots=True)
class Scorer:
    """Running score for the current game."""
    current_score: int = 0

    def add(self, points: int) -> int:
        if points <= 0:
            return self.current_score
        self.current_score += points
        return self.current_score
