"""有効な行から投票用紙を組み立てる."""

from collections.abc import Iterable, Sequence

from src.domain.exceptions import UnknownCandidateError
from src.domain.services.ballot_validator import sort_by_rank
from src.domain.value_objects.ranked_ballot import Ballot, Candidate, Vote


def build_ballot(
    votes: Iterable[Vote],
    candidates: Sequence[Candidate],
    voter: str | None = None,
) -> Ballot:
    """投票を順位順の候補者番号（1始まり）の列に変換する.

    順位なしの候補者は含めない。全て順位なしの場合は空の投票用紙になる。

    Args:
        votes: 検証済みの投票
        candidates: ヘッダー行の候補者
        voter: エラーメッセージ用の投票者名

    Returns:
        Ballot: 候補者番号のタプル

    Raises:
        UnknownCandidateError: 候補者名がヘッダー行に存在しない場合
    """
    positions = {c.name: c.position for c in reversed(candidates)}

    ballot: list[int] = []
    for vote in sort_by_rank(votes):
        if not vote.is_ranked:
            continue
        position = positions.get(vote.candidate_name)
        if position is None:
            raise UnknownCandidateError(vote.candidate_name, voter)
        ballot.append(position)
    return tuple(ballot)
