"""集計表→BLT変換に関するDTO."""

import re

from dataclasses import dataclass, field
from datetime import date

from src.domain.exceptions import InvalidSeatCountError
from src.domain.value_objects.ranked_ballot import Ballot, BallotRejection, Candidate


_SEAT_COUNT_RE = re.compile(r"\s*([0-9]+)\s*")


def parse_seat_count(value: object) -> int:
    """議席数を正の整数として解釈する.

    Raises:
        InvalidSeatCountError: 未指定、数値でない、または1未満の場合
    """
    if isinstance(value, bool) or value is None:
        raise InvalidSeatCountError(value)
    if isinstance(value, int):
        seat_count = value
    elif isinstance(value, str):
        match = _SEAT_COUNT_RE.fullmatch(value)
        if not match:
            raise InvalidSeatCountError(value)
        seat_count = int(match.group(1))
    else:
        raise InvalidSeatCountError(value)

    if seat_count < 1:
        raise InvalidSeatCountError(value)
    return seat_count


def default_election_name(prefix: str = "Election", today: date | None = None) -> str:
    """既定の選挙名（例: "Election 2023-12-04"）."""
    today = today or date.today()
    return f"{prefix} {today.isoformat()}"


# =============================================================================
# Input DTOs
# =============================================================================


@dataclass
class ConvertResultsTableInputDto:
    """集計表→BLT変換の入力DTO."""

    seat_count: int
    election_name: str
    sort_ballots: bool = True
    show_names: bool = False

    def __post_init__(self) -> None:
        self.seat_count = parse_seat_count(self.seat_count)


# =============================================================================
# Output DTOs
# =============================================================================


@dataclass
class ConvertResultsTableOutputDto:
    """集計表→BLT変換の出力DTO.

    blt_lines と warnings は別々に出力先を切り替えられるよう分けて保持する。
    """

    blt_lines: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    candidates: list[Candidate] = field(default_factory=list)
    ballots: list[Ballot] = field(default_factory=list)
    rejections: list[BallotRejection] = field(default_factory=list)
