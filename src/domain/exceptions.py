"""BLT変換の致命的エラー.

いずれも検出した時点で送出し、変換全体を中断する（部分的な出力は行わない）。
重複順位・順位飛ばしは致命的エラーではなく、警告として扱う。
"""


class BltConversionError(Exception):
    """BLT変換エラーの基底クラス."""


class InvalidSeatCountError(BltConversionError):
    """議席数が指定されていない、または数値でない."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Required number of seats missing or invalid: {value!r}")
        self.value = value


class MissingAnnotationError(BltConversionError):
    """セルのtitle属性がない、または空."""

    def __init__(self, cell: str) -> None:
        super().__init__(f"Cell {cell} empty title attribute")
        self.cell = cell


class MalformedAnnotationError(BltConversionError):
    """title属性に候補者名または順位が含まれていない."""

    def __init__(self, cell: str, annotation: str) -> None:
        super().__init__(f"Cell {cell} empty candidate or rank in title")
        self.cell = cell
        self.annotation = annotation


class InvalidRankError(BltConversionError):
    """順位が整数として解釈できない."""

    def __init__(self, cell: str, token: str) -> None:
        super().__init__(f"Cell {cell} rank is not an integer: {token!r}")
        self.cell = cell
        self.token = token


class UnknownCandidateError(BltConversionError):
    """投票の候補者名がヘッダー行の候補者と一致しない."""

    def __init__(self, candidate_name: str, voter: str | None = None) -> None:
        msg = f"Unknown candidate {candidate_name!r}"
        if voter is not None:
            msg += f" in ballot of {voter!r}"
        super().__init__(msg)
        self.candidate_name = candidate_name
        self.voter = voter


class ResultsTableNotFoundError(BltConversionError):
    """集計表が文書内に見つからない."""

    def __init__(self, selector: str) -> None:
        super().__init__(f"No results table matching {selector!r}")
        self.selector = selector


class MalformedResultsTableError(BltConversionError):
    """集計表の構造が想定と異なる."""
