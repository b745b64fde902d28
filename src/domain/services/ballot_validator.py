"""投票用紙の有効性判定.

STV集計ソフトは「順位の飛ばし」と「同じ順位の重複」を含む投票用紙を受け付けない。
全候補者に順位を付ける必要はなく、空の投票用紙も有効である。
"""

from collections import Counter
from collections.abc import Iterable

from src.domain.value_objects.ranked_ballot import RejectionKind, Vote


def sort_by_rank(votes: Iterable[Vote]) -> list[Vote]:
    """順位の昇順に並べる（順位なしは末尾）."""
    return sorted(votes, key=lambda v: v.rank)


def has_duplicate_rankings(votes: Iterable[Vote]) -> bool:
    """順位なし以外で同じ順位が2つ以上あるかを判定する."""
    counts = Counter(v.rank.value for v in votes if v.is_ranked)
    return any(count > 1 for count in counts.values())


def has_skipped_rankings(votes: Iterable[Vote]) -> bool:
    """順位が1から連続していないかを判定する.

    順位なしを除いて昇順に並べたとき、i番目（0始まり）の順位は i+1 でなければならない。
    """
    ranked = sort_by_rank(v for v in votes if v.is_ranked)
    return any(v.rank.value != i + 1 for i, v in enumerate(ranked))


def find_rejection(votes: Iterable[Vote]) -> RejectionKind | None:
    """行の投票を検証し、無効の場合はその種別を返す.

    重複の判定を先に行い、重複がある場合は飛ばしの判定は行わない。

    Returns:
        無効の種別。有効な場合はNone。
    """
    votes = list(votes)
    if has_duplicate_rankings(votes):
        return RejectionKind.DUPLICATE
    if has_skipped_rankings(votes):
        return RejectionKind.SKIP
    return None
