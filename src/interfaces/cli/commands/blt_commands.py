"""集計表→BLT変換コマンド.

Usage:
    table-to-blt results.html 3
    table-to-blt results.html 3 "Board election 2024" false true
    table-to-blt results.html 3 --no-sort-ballots --show-names > election.blt

BLTファイルは標準出力に、無効票の警告は標準エラーに出力する。
"""

import logging

from pathlib import Path

import click

from click.core import ParameterSource

from src.application.dtos.blt_conversion_dto import (
    ConvertResultsTableInputDto,
    default_election_name,
)
from src.application.usecases.convert_results_table_to_blt_usecase import (
    ConvertResultsTableToBltUseCase,
)
from src.infrastructure.config import get_settings
from src.infrastructure.importers.wbs_results_html_document import (
    WbsResultsHtmlDocument,
)
from src.interfaces.cli.base import configure_logging, with_error_handling


logger = logging.getLogger(__name__)


def _resolve_flag(
    name: str, option: bool | None, positional: bool | None, default: bool
) -> bool:
    """オプション > 位置引数 > 設定値 の順に採用する."""
    source = click.get_current_context().get_parameter_source(name)
    if option is not None and source not in (None, ParameterSource.DEFAULT):
        return option
    if positional is not None:
        return positional
    return default


@click.command("table-to-blt")
@click.argument(
    "file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.argument("seats", required=False)
@click.argument("election_name", required=False)
@click.argument("sort_ballots_arg", type=click.BOOL, required=False)
@click.argument("show_names_arg", type=click.BOOL, required=False)
@click.option(
    "--sort-ballots/--no-sort-ballots",
    "sort_ballots",
    default=None,
    help="投票用紙を辞書順に並べる（デフォルト: true）",
)
@click.option(
    "--show-names/--hide-names",
    "show_names",
    default=None,
    help="候補者の実名を出力する（デフォルト: false）",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="ログレベル（デフォルト: BLT_LOG_LEVEL）",
)
@with_error_handling
def table_to_blt(
    file: Path,
    seats: str | None,
    election_name: str | None,
    sort_ballots_arg: bool | None,
    show_names_arg: bool | None,
    sort_ballots: bool | None,
    show_names: bool | None,
    log_level: str | None,
):
    """Convert a ranked-choice results table (HTML) into a BLT file."""
    settings = get_settings()
    configure_logging(log_level)

    input_dto = ConvertResultsTableInputDto(
        seat_count=seats,  # type: ignore[arg-type]
        election_name=election_name
        if election_name is not None
        else default_election_name(settings.election_name_prefix),
        sort_ballots=_resolve_flag(
            "sort_ballots", sort_ballots, sort_ballots_arg, settings.sort_ballots
        ),
        show_names=_resolve_flag(
            "show_names", show_names, show_names_arg, settings.show_names
        ),
    )

    document = WbsResultsHtmlDocument.from_file(
        file, settings.results_table_selector
    )
    result = ConvertResultsTableToBltUseCase().execute(document, input_dto)
    logger.info(
        "BLT出力: %d行, 警告: %d件", len(result.blt_lines), len(result.warnings)
    )

    click.echo("\n".join(result.blt_lines))
    for warning in result.warnings:
        click.echo(warning, err=True)
