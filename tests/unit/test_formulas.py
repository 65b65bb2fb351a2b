"""Tests for formulas module."""

from helpers import formulas


class TestRounding:
    def test_half_goes_up(self):
        assert formulas.round_half_up(2.5) == 3
        assert formulas.round_half_up(0.5) == 1

    def test_below_half(self):
        assert formulas.round_half_up(1.49) == 1

    def test_integer(self):
        assert formulas.round_half_up(40.0) == 40


class TestPercentage:
    def test_thirds(self):
        assert formulas.percentage(1, 3) == 33
        assert formulas.percentage(2, 3) == 67

    def test_empty_whole(self):
        assert formulas.percentage(5, 0) == 0

    def test_full(self):
        assert formulas.percentage(7, 7) == 100


class TestYesRatio:
    def test_close(self):
        assert formulas.yes_ratio(52, 48) == 52

    def test_no_votes(self):
        assert formulas.yes_ratio(0, 0) == 0

    def test_almost_unanimous_rounds_up(self):
        assert formulas.yes_ratio(999, 1) == 100


class TestMargin:
    def test_margin(self):
        assert formulas.vote_margin(10, 30) == 20

    def test_could_flip(self):
        assert formulas.could_flip(5, 5)
        assert formulas.could_flip(6, 2)

    def test_could_not_flip(self):
        assert not formulas.could_flip(4, 5)
        assert not formulas.could_flip(0, 0)


class TestDominance:
    def test_dominant(self):
        assert formulas.dominance(81, 19, 0) == 0.81

    def test_no_vote_dilutes(self):
        assert formulas.dominance(90, 0, 0, 10) == 0.9

    def test_empty(self):
        assert formulas.dominance(0, 0, 0) == 0.0

    def test_distance_to_tie(self):
        assert formulas.distance_to_tie(40) == 10
        assert formulas.distance_to_tie(60) == 10
        assert formulas.distance_to_tie(50) == 0


class TestAgreement:
    def test_perfect(self):
        assert formulas.agreement_rate([("yes", "yes"), ("no", "no")]) == 100

    def test_half(self):
        assert formulas.agreement_rate([("yes", "yes"), ("no", "yes")]) == 50

    def test_none(self):
        assert formulas.agreement_rate([]) == 0


class TestCommitment:
    def test_full_chamber(self):
        assert formulas.commitment(700, 2, 350) == 100

    def test_no_initiatives(self):
        assert formulas.commitment(0, 0, 350) == 0
