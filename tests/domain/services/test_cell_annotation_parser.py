"""セル注記パーサーのテスト."""

import pytest

from src.domain.exceptions import (
    InvalidRankError,
    MalformedAnnotationError,
    MissingAnnotationError,
)
from src.domain.services.cell_annotation_parser import (
    is_withdrawn,
    parse_rank,
    parse_vote,
    strip_withdrawn_marker,
)
from src.domain.value_objects.ranked_ballot import UNRANKED, Rank, Vote


class TestParseVote:
    """parse_voteのテスト."""

    def test_ranked_with_label(self) -> None:
        assert parse_vote("Ann Lee:Ranked 2") == Vote("Ann Lee", Rank.ranked(2))

    def test_bare_digit(self) -> None:
        assert parse_vote("Ann Lee:3") == Vote("Ann Lee", Rank.ranked(3))

    def test_zero_rank(self) -> None:
        assert parse_vote("Ann Lee:Ranked 0").rank == Rank.ranked(0)

    def test_unranked(self) -> None:
        assert parse_vote("Bo Park:Unranked") == Vote("Bo Park", UNRANKED)

    def test_unranked_case_insensitive_with_whitespace(self) -> None:
        assert parse_vote("Bo Park: unranked ").rank == UNRANKED

    def test_withdrawn_marker_removed(self) -> None:
        vote = parse_vote(
            "Candidate has withdrawn from the election: Carol Chen:Ranked 1"
        )
        assert vote == Vote("Carol Chen", Rank.ranked(1))

    def test_splits_on_first_colon(self) -> None:
        """順位トークン側に「:」が残っても末尾1桁を順位とする."""
        assert parse_vote("Ann:note: Ranked 4") == Vote("Ann", Rank.ranked(4))

    @pytest.mark.parametrize("annotation", [None, ""])
    def test_missing_annotation(self, annotation: str | None) -> None:
        with pytest.raises(MissingAnnotationError, match="empty title attribute"):
            parse_vote(annotation, "<td></td>")

    @pytest.mark.parametrize("annotation", ["Ann Lee", ":Ranked 1", "Ann Lee:"])
    def test_missing_candidate_or_rank(self, annotation: str) -> None:
        with pytest.raises(MalformedAnnotationError) as exc_info:
            parse_vote(annotation, "<td>x</td>")
        assert exc_info.value.annotation == annotation
        assert "<td>x</td>" in str(exc_info.value)

    def test_rank_not_integer(self) -> None:
        with pytest.raises(InvalidRankError, match="rank is not an integer"):
            parse_vote("Ann Lee:Ranked")

    def test_two_digit_rank_rejected(self) -> None:
        """1桁を超える順位は扱わない."""
        with pytest.raises(InvalidRankError):
            parse_vote("Ann Lee:Ranked 12")


class TestParseRank:
    """parse_rankのテスト."""

    def test_trailing_digit(self) -> None:
        assert parse_rank("Ranked 7") == Rank.ranked(7)

    def test_plain_integer_with_whitespace(self) -> None:
        assert parse_rank(" 5 ") == Rank.ranked(5)

    def test_unranked_must_be_whole_token(self) -> None:
        with pytest.raises(InvalidRankError):
            parse_rank("Unranked later")

    def test_error_carries_token(self) -> None:
        with pytest.raises(InvalidRankError) as exc_info:
            parse_rank("first", "<td>first</td>")
        assert exc_info.value.token == "first"
        assert exc_info.value.cell == "<td>first</td>"


class TestWithdrawnMarker:
    """辞退注記のテスト."""

    def test_is_withdrawn(self) -> None:
        assert is_withdrawn("Candidate has withdrawn from the election: Carol Chen")

    def test_not_withdrawn(self) -> None:
        assert not is_withdrawn("Carol Chen")

    def test_marker_requires_trailing_whitespace(self) -> None:
        assert not is_withdrawn("Candidate has withdrawn from the election:")

    def test_strip(self) -> None:
        assert (
            strip_withdrawn_marker(
                "Candidate has withdrawn from the election: Carol Chen"
            )
            == "Carol Chen"
        )

    def test_strip_without_marker(self) -> None:
        assert strip_withdrawn_marker("  Carol Chen ") == "  Carol Chen "
