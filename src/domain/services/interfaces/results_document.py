"""集計表文書のインターフェース — Domain layer.

アンケートツールが出力した集計表を、読み取り専用のツリーとして扱う。
具体的な実装（BeautifulSoup等）はインフラストラクチャ層で提供する。
"""

from collections.abc import Sequence
from typing import Protocol


class ResultsCell(Protocol):
    """集計表の1セル."""

    @property
    def text(self) -> str:
        """セルのテキスト内容."""
        ...

    @property
    def title(self) -> str | None:
        """セルのtitle属性（順位の注記）. 属性がない場合はNone."""
        ...

    def describe(self) -> str:
        """エラーメッセージ用のセル表現."""
        ...


class ResultsRow(Protocol):
    """集計表の1行."""

    @property
    def header_cells(self) -> Sequence[ResultsCell]:
        """見出しセル（th）."""
        ...

    @property
    def data_cells(self) -> Sequence[ResultsCell]:
        """データセル（td）."""
        ...


class ResultsTable(Protocol):
    """集計表."""

    @property
    def rows(self) -> Sequence[ResultsRow]:
        ...


class ResultsDocument(Protocol):
    """集計表を含む文書."""

    def find_results_table(self) -> ResultsTable:
        """最初の集計表を返す.

        Raises:
            ResultsTableNotFoundError: 集計表が見つからない場合
        """
        ...
