"""BLT形式のシリアライザー.

STV集計ソフト（OpenSTV等）が読み込むBLTファイルを生成する。

出力形式:
    <候補者数> <議席数>
    -2 -4                  (辞退候補者がいる場合のみ)
    1 2 1 3 0              (投票用紙ごとに1行: 重み1, 候補者番号, 終端0)
    1 0                    (空の投票用紙)
    0
    "Candidate 1"          (候補者ごとに1行)
    ...
    "<選挙名>"
"""

from collections.abc import Sequence
from dataclasses import dataclass

from src.domain.value_objects.ranked_ballot import Ballot, Candidate


BALLOT_WEIGHT = 1
END_OF_BALLOT = 0
END_OF_BALLOTS = "0"


@dataclass(frozen=True)
class BltDocument:
    """BLTファイルの内容."""

    candidate_count: int
    seat_count: int
    withdrawn: tuple[int, ...]
    ballots: tuple[Ballot, ...]
    candidate_labels: tuple[str, ...]
    election_name: str

    def lines(self) -> list[str]:
        """BLTファイルの各行を返す."""
        lines = [f"{self.candidate_count} {self.seat_count}"]
        if self.withdrawn:
            lines.append(" ".join(str(-index) for index in self.withdrawn))
        lines.extend(format_ballot(ballot) for ballot in self.ballots)
        lines.append(END_OF_BALLOTS)
        lines.extend(_quote(label) for label in self.candidate_labels)
        lines.append(_quote(self.election_name))
        return lines

    def to_text(self) -> str:
        return "\n".join(self.lines())


def format_ballot(ballot: Ballot) -> str:
    """投票用紙1行を整形する（例: (2, 1, 3) → "1 2 1 3 0"）."""
    return " ".join(str(v) for v in (BALLOT_WEIGHT, *ballot, END_OF_BALLOT))


def candidate_label(candidate: Candidate, show_names: bool) -> str:
    """候補者行に出力するラベル（実名または「Candidate N」）."""
    if show_names:
        return candidate.name.strip()
    return f"Candidate {candidate.position}"


def _quote(text: str) -> str:
    return f'"{text}"'


def build_blt_document(
    seat_count: int,
    candidates: Sequence[Candidate],
    ballots: Sequence[Ballot],
    election_name: str,
    sort_ballots: bool = False,
    show_names: bool = False,
    candidate_count: int | None = None,
) -> BltDocument:
    """BLT文書を組み立てる.

    Args:
        seat_count: 議席数
        candidates: ヘッダー順の候補者
        ballots: 有効な投票用紙（行順）
        election_name: 選挙名
        sort_ballots: Trueの場合、投票用紙を候補者番号列の辞書順に並べる
        show_names: Trueの場合、候補者の実名を出力する
        candidate_count: 候補者数（省略時は候補者リストの長さ）

    Returns:
        BltDocument
    """
    ordered = sorted(ballots) if sort_ballots else list(ballots)
    return BltDocument(
        candidate_count=len(candidates) if candidate_count is None else candidate_count,
        seat_count=seat_count,
        withdrawn=tuple(c.position for c in candidates if c.withdrawn),
        ballots=tuple(tuple(b) for b in ordered),
        candidate_labels=tuple(candidate_label(c, show_names) for c in candidates),
        election_name=election_name,
    )


def serialize_blt(
    seat_count: int,
    candidates: Sequence[Candidate],
    ballots: Sequence[Ballot],
    election_name: str,
    sort_ballots: bool = False,
    show_names: bool = False,
) -> list[str]:
    """BLTファイルの各行を生成する."""
    document = build_blt_document(
        seat_count,
        candidates,
        ballots,
        election_name,
        sort_ballots=sort_ballots,
        show_names=show_names,
    )
    return document.lines()
