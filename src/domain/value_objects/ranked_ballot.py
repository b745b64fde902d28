"""順位付き投票の値オブジェクト — Domain layer.

集計表の1セルから得られる投票（候補者名と順位）と、有効な行から組み立てた
投票用紙（1始まりの候補者インデックス列）を表す。
"""

from __future__ import annotations

import functools

from dataclasses import dataclass
from enum import Enum


@functools.total_ordering
@dataclass(frozen=True)
class Rank:
    """順位.

    ``value`` が None の場合は「順位なし（Unranked）」を表す。
    順位なしは全ての順位より後ろに並ぶ。
    """

    value: int | None = None

    @classmethod
    def ranked(cls, value: int) -> Rank:
        return cls(value)

    @property
    def is_unranked(self) -> bool:
        return self.value is None

    def _sort_key(self) -> tuple[int, int]:
        if self.value is None:
            return (1, 0)
        return (0, self.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __str__(self) -> str:
        return "Unranked" if self.value is None else str(self.value)


UNRANKED = Rank()


@dataclass(frozen=True)
class Vote:
    """1セル分の投票（候補者名, 順位）."""

    candidate_name: str
    rank: Rank

    @property
    def is_ranked(self) -> bool:
        return not self.rank.is_unranked


@dataclass(frozen=True)
class Candidate:
    """ヘッダー行から読み取った候補者.

    position はヘッダー行での1始まりの位置で、BLTの候補者番号になる。
    """

    name: str
    position: int
    withdrawn: bool = False


Ballot = tuple[int, ...]


class RejectionKind(Enum):
    """無効票の種別."""

    DUPLICATE = "duplicate"
    SKIP = "skip"

    @property
    def description(self) -> str:
        if self is RejectionKind.DUPLICATE:
            return "duplicate rankings"
        return "skips in rankings"


@dataclass(frozen=True)
class BallotRejection:
    """無効と判定された行."""

    kind: RejectionKind
    voter: str

    def warning_line(self) -> str:
        return f"Ballot ignored ({self.kind.description}): {self.voter}"


RowOutcome = Ballot | BallotRejection
