"""Leaderboard model."""

from dataclasses import dataclass


@dataclass
class RankingEntry:
    """One row of the leaderboard. Position is assigned from output order."""

    position: int
    user_id: int
    user_name: str
    points: int
    profile_picture_url: str | None = None

    def to_dict(self) -> dict:
        return {
            "position": self.position,
            "userId": self.user_id,
            "userName": self.user_name,
            "profilePictureUrl": self.profile_picture_url,
            "points": self.points,
        }


def rank_rows(rows: list[tuple[int, str, str | None, int]]) -> list[RankingEntry]:
    """Number already-sorted (user_id, user_name, picture, points) rows from 1."""
    return [
        RankingEntry(
            position=index,
            user_id=user_id,
            user_name=user_name,
            profile_picture_url=picture,
            points=points,
        )
        for index, (user_id, user_name, picture, points) in enumerate(rows, start=1)
    ]
