"""順位付き投票の値オブジェクトのテスト."""

from src.domain.value_objects.ranked_ballot import (
    UNRANKED,
    BallotRejection,
    Rank,
    RejectionKind,
    Vote,
)


class TestRank:
    def test_ordering(self) -> None:
        assert Rank.ranked(1) < Rank.ranked(2)
        assert Rank.ranked(9) < UNRANKED
        assert not UNRANKED < Rank.ranked(0)

    def test_unranked_equal(self) -> None:
        assert Rank() == UNRANKED
        assert UNRANKED.is_unranked
        assert not Rank.ranked(1).is_unranked

    def test_sorted(self) -> None:
        ranks = [UNRANKED, Rank.ranked(3), Rank.ranked(1)]
        assert sorted(ranks) == [Rank.ranked(1), Rank.ranked(3), UNRANKED]

    def test_str(self) -> None:
        assert str(Rank.ranked(4)) == "4"
        assert str(UNRANKED) == "Unranked"


class TestVote:
    def test_is_ranked(self) -> None:
        assert Vote("A", Rank.ranked(1)).is_ranked
        assert not Vote("A", UNRANKED).is_ranked


class TestBallotRejection:
    def test_duplicate_warning_line(self) -> None:
        rejection = BallotRejection(RejectionKind.DUPLICATE, "Voter 2")
        assert rejection.warning_line() == (
            "Ballot ignored (duplicate rankings): Voter 2"
        )

    def test_skip_warning_line(self) -> None:
        rejection = BallotRejection(RejectionKind.SKIP, "Voter 1")
        assert rejection.warning_line() == "Ballot ignored (skips in rankings): Voter 1"
