"""集計表→BLT変換ユースケース.

アンケートツールの順位投票集計表から、STV集計ソフト用のBLTファイルを生成する。

処理フロー:
    1. 文書から集計表を取得
    2. ヘッダー行から候補者（辞退フラグ付き）を読み取る
    3. 各データ行のセルを投票に変換し、重複・飛ばしを検証
    4. 有効な行を投票用紙に変換し、無効な行は警告に記録
    5. BLT文書を生成
"""

import logging

from collections.abc import Sequence

from src.application.dtos.blt_conversion_dto import (
    ConvertResultsTableInputDto,
    ConvertResultsTableOutputDto,
)
from src.domain.exceptions import MalformedResultsTableError
from src.domain.services.ballot_builder import build_ballot
from src.domain.services.ballot_validator import find_rejection
from src.domain.services.blt_serializer import build_blt_document
from src.domain.services.cell_annotation_parser import (
    is_withdrawn,
    parse_vote,
    strip_withdrawn_marker,
)
from src.domain.services.interfaces.results_document import (
    ResultsDocument,
    ResultsRow,
)
from src.domain.value_objects.ranked_ballot import (
    BallotRejection,
    Candidate,
    RowOutcome,
)


logger = logging.getLogger(__name__)


def read_candidates(header_row: ResultsRow) -> list[Candidate]:
    """ヘッダー行から候補者を読み取る（先頭の見出しセルは除く）."""
    candidates: list[Candidate] = []
    for position, cell in enumerate(header_row.header_cells[1:], start=1):
        text = cell.text
        candidates.append(
            Candidate(
                name=strip_withdrawn_marker(text),
                position=position,
                withdrawn=is_withdrawn(text),
            )
        )
    return candidates


def voter_label(row: ResultsRow) -> str:
    """行の投票者名（警告メッセージ用）."""
    header_cells = row.header_cells
    if not header_cells:
        return ""
    return header_cells[0].text


def process_row(row: ResultsRow, candidates: Sequence[Candidate]) -> RowOutcome:
    """1行を投票用紙または無効票に変換する."""
    voter = voter_label(row)
    votes = [parse_vote(cell.title, cell.describe()) for cell in row.data_cells]

    kind = find_rejection(votes)
    if kind is not None:
        return BallotRejection(kind=kind, voter=voter)
    return build_ballot(votes, candidates, voter)


class ConvertResultsTableToBltUseCase:
    """集計表→BLT変換のユースケース."""

    def execute(
        self,
        document: ResultsDocument,
        input_dto: ConvertResultsTableInputDto,
    ) -> ConvertResultsTableOutputDto:
        """変換を実行する.

        致命的なエラーは BltConversionError として送出し、部分的な出力は返さない。
        """
        table = document.find_results_table()
        rows = list(table.rows)
        if not rows:
            raise MalformedResultsTableError("Results table has no rows")

        candidates = read_candidates(rows[0])
        data_rows = rows[1:]

        # ヘッダーの先頭セルは見出しなので、候補者数は最初のデータ行から数える
        if data_rows:
            candidate_count = len(data_rows[0].data_cells)
            if candidate_count != len(candidates):
                msg = (
                    f"Header lists {len(candidates)} candidates "
                    f"but the first ballot row has {candidate_count} vote cells"
                )
                raise MalformedResultsTableError(msg)
        else:
            candidate_count = len(candidates)

        logger.info("候補者数: %d, 投票行数: %d", candidate_count, len(data_rows))
        withdrawn = [c.name for c in candidates if c.withdrawn]
        if withdrawn:
            logger.info("辞退候補者: %s", ", ".join(withdrawn))

        output = ConvertResultsTableOutputDto(candidates=candidates)
        for row in data_rows:
            outcome = process_row(row, candidates)
            if isinstance(outcome, BallotRejection):
                line = outcome.warning_line()
                logger.info("無効票: %s", line)
                output.rejections.append(outcome)
                output.warnings.append(line)
            else:
                output.ballots.append(outcome)

        blt_document = build_blt_document(
            seat_count=input_dto.seat_count,
            candidates=candidates,
            ballots=output.ballots,
            election_name=input_dto.election_name,
            sort_ballots=input_dto.sort_ballots,
            show_names=input_dto.show_names,
            candidate_count=candidate_count,
        )
        output.blt_lines = blt_document.lines()

        logger.info(
            "有効票: %d, 無効票: %d", len(output.ballots), len(output.rejections)
        )
        return output
