"""E2Eテスト: サンプル集計表HTMLからのBLT生成.

各サンプルには期待するBLT出力（pre.blt）と警告（pre.warnings）が埋め込まれている。
"""

from pathlib import Path

import pytest

from src.application.dtos.blt_conversion_dto import ConvertResultsTableInputDto
from src.application.usecases.convert_results_table_to_blt_usecase import (
    ConvertResultsTableToBltUseCase,
)
from src.infrastructure.importers.wbs_results_html_document import (
    WbsResultsHtmlDocument,
)


FIXTURE_DIR = Path(__file__).resolve().parent.parent / "fixtures" / "wbs"

SAMPLE_FILES = [
    "sample-table-dup-rankings.html",
    "sample-table-skips.html",
    "sample-table.html",
]


@pytest.mark.e2e
class TestResultsTableSamples:
    """サンプル集計表の変換結果が埋め込みの期待値と一致する."""

    @pytest.mark.parametrize("file_name", SAMPLE_FILES)
    def test_matches_documented_output(self, file_name: str) -> None:
        document = WbsResultsHtmlDocument.from_file(FIXTURE_DIR / file_name)
        expected_blt = (document.select_text("pre.blt") or "").strip()
        expected_warnings = (document.select_text("pre.warnings") or "").strip()

        input_dto = ConvertResultsTableInputDto(
            seat_count=3,
            election_name="Election 2023-12-04",
            sort_ballots=False,
            show_names=False,
        )
        result = ConvertResultsTableToBltUseCase().execute(document, input_dto)

        assert "\n".join(result.blt_lines) == expected_blt
        assert "\n".join(result.warnings) == expected_warnings
