"""アンケートツール（WBS）集計表HTMLの読み込み.

順位入力コントロールの集計ページは、class="results" を持つtable要素に結果を出力する。

表の構造:
    - 1行目: 先頭セル以外のth要素が候補者名
    - 2行目以降: 先頭のth要素が投票者名、残りのtd要素が投票
    - 各tdのtitle属性に「<候補者名>:<順位>」
"""

import logging

from pathlib import Path

from bs4 import BeautifulSoup, Tag

from src.domain.exceptions import ResultsTableNotFoundError


logger = logging.getLogger(__name__)

DEFAULT_TABLE_SELECTOR = "table.results"


class HtmlResultsCell:
    """td/th要素のラッパー."""

    def __init__(self, element: Tag) -> None:
        self._element = element

    @property
    def text(self) -> str:
        return self._element.get_text()

    @property
    def title(self) -> str | None:
        value = self._element.get("title")
        if value is None:
            return None
        return str(value)

    def describe(self) -> str:
        return str(self._element)


class HtmlResultsRow:
    """tr要素のラッパー."""

    def __init__(self, element: Tag) -> None:
        self._element = element

    @property
    def header_cells(self) -> list[HtmlResultsCell]:
        return [HtmlResultsCell(th) for th in self._element.find_all("th")]

    @property
    def data_cells(self) -> list[HtmlResultsCell]:
        return [HtmlResultsCell(td) for td in self._element.find_all("td")]


class HtmlResultsTable:
    """table要素のラッパー."""

    def __init__(self, element: Tag) -> None:
        self._element = element

    @property
    def rows(self) -> list[HtmlResultsRow]:
        return [HtmlResultsRow(tr) for tr in self._element.find_all("tr")]


class WbsResultsHtmlDocument:
    """集計表HTML文書."""

    def __init__(
        self,
        soup: BeautifulSoup,
        table_selector: str = DEFAULT_TABLE_SELECTOR,
    ) -> None:
        self._soup = soup
        self._table_selector = table_selector

    @classmethod
    def from_html(
        cls, html: str, table_selector: str = DEFAULT_TABLE_SELECTOR
    ) -> "WbsResultsHtmlDocument":
        return cls(BeautifulSoup(html, "html.parser"), table_selector)

    @classmethod
    def from_file(
        cls, path: Path | str, table_selector: str = DEFAULT_TABLE_SELECTOR
    ) -> "WbsResultsHtmlDocument":
        """HTMLファイルを読み込む."""
        path = Path(path)
        logger.info("HTML読み込み中: %s", path)
        return cls.from_html(path.read_text(encoding="utf-8"), table_selector)

    def find_results_table(self) -> HtmlResultsTable:
        """最初の集計表を返す.

        Raises:
            ResultsTableNotFoundError: 集計表が見つからない場合
        """
        element = self._soup.select_one(self._table_selector)
        if not isinstance(element, Tag):
            raise ResultsTableNotFoundError(self._table_selector)
        return HtmlResultsTable(element)

    def select_text(self, selector: str) -> str | None:
        """セレクタに一致する最初の要素のテキストを返す."""
        element = self._soup.select_one(selector)
        if element is None:
            return None
        return element.get_text()
