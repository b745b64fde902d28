"""集計表セルの注記パーサー.

アンケートツールの順位入力コントロールは、各セルのtitle属性に
「<候補者名>:<順位>」の形式で投票内容を出力する。
対応パターン:
- 「Alice:Ranked 2」（末尾の1桁を順位とする）
- 「Alice:2」（順位のみ）
- 「Alice:Unranked」（順位なし）
- 「Candidate has withdrawn from the election: Alice:Unranked」（辞退候補者）
"""

import re

from src.domain.exceptions import (
    InvalidRankError,
    MalformedAnnotationError,
    MissingAnnotationError,
)
from src.domain.value_objects.ranked_ballot import UNRANKED, Rank, Vote


WITHDRAWN_MARKER = "Candidate has withdrawn from the election:"

_WITHDRAWN_RE = re.compile(re.escape(WITHDRAWN_MARKER) + r"\s")

_UNRANKED_RE = re.compile(r"\s*unranked\s*", re.IGNORECASE)

# 「Ranked 3」等: 空白の後の末尾1桁
_TRAILING_DIGIT_RE = re.compile(r".*\s+([0-9])", re.DOTALL)

_INTEGER_RE = re.compile(r"\s*([+-]?[0-9]+)\s*")


def is_withdrawn(text: str) -> bool:
    """辞退の注記が含まれるかを判定する."""
    return _WITHDRAWN_RE.search(text) is not None


def strip_withdrawn_marker(text: str) -> str:
    """辞退の注記を取り除く."""
    return _WITHDRAWN_RE.sub("", text)


def parse_rank(token: str, cell: str = "") -> Rank:
    """順位トークンを解析する.

    Args:
        token: 「:」以降の文字列
        cell: エラーメッセージ用のセル表現

    Returns:
        Rank: 解析した順位

    Raises:
        InvalidRankError: 整数として解釈できない場合
    """
    if _UNRANKED_RE.fullmatch(token):
        return UNRANKED

    match = _TRAILING_DIGIT_RE.fullmatch(token)
    if match:
        return Rank.ranked(int(match.group(1)))

    match = _INTEGER_RE.fullmatch(token)
    if match:
        return Rank.ranked(int(match.group(1)))

    raise InvalidRankError(cell or repr(token), token)


def parse_vote(annotation: str | None, cell: str = "") -> Vote:
    """セルの注記から投票を取り出す.

    Args:
        annotation: セルのtitle属性
        cell: エラーメッセージ用のセル表現（省略時は注記そのもの）

    Returns:
        Vote: 候補者名と順位

    Raises:
        MissingAnnotationError: 注記がない、または空の場合
        MalformedAnnotationError: 候補者名または順位が空の場合
        InvalidRankError: 順位が整数でない場合
    """
    cell = cell or repr(annotation)
    if not annotation:
        raise MissingAnnotationError(cell)

    # 辞退の情報は候補者側（ヘッダー）で扱う
    text = strip_withdrawn_marker(annotation)

    candidate_name, _, rank_token = text.partition(":")
    if not candidate_name or not rank_token:
        raise MalformedAnnotationError(cell, annotation)

    return Vote(candidate_name=candidate_name, rank=parse_rank(rank_token, cell))
