"""
Fiat-Shamir transcript tests.
"""

import pytest
from zkmember.errors import EncodingError
from zkmember.field import FR, G1, G2, CURVE_ORDER, ec_mul
from zkmember.transcript import Transcript


class TestTranscript:
    def test_same_messages_same_challenge(self):
        t1 = Transcript(b"test")
        t2 = Transcript(b"test")
        for t in (t1, t2):
            t.append_scalar(b"v", FR(5))
            t.append_point(b"p", ec_mul(G1, 3))
        assert t1.challenge_scalar(b"c") == t2.challenge_scalar(b"c")

    def test_label_separates_domains(self):
        t1 = Transcript(b"a")
        t2 = Transcript(b"b")
        assert t1.challenge_scalar(b"c") != t2.challenge_scalar(b"c")

    def test_message_order_matters(self):
        t1 = Transcript()
        t1.append_message(b"x", b"1")
        t1.append_message(b"y", b"2")
        t2 = Transcript()
        t2.append_message(b"y", b"2")
        t2.append_message(b"x", b"1")
        assert t1.challenge_scalar(b"c") != t2.challenge_scalar(b"c")

    def test_length_prefix(self):
        # "ab" + "c" 와 "a" + "bc" 는 달라야 한다
        t1 = Transcript()
        t1.append_message(b"m", b"ab")
        t1.append_message(b"m", b"c")
        t2 = Transcript()
        t2.append_message(b"m", b"a")
        t2.append_message(b"m", b"bc")
        assert t1.challenge_scalar(b"c") != t2.challenge_scalar(b"c")

    def test_chained_challenges_differ(self):
        t = Transcript()
        c1 = t.challenge_scalar(b"c")
        c2 = t.challenge_scalar(b"c")
        assert c1 != c2

    def test_challenge_in_field(self):
        c = Transcript().challenge_scalar(b"c")
        assert isinstance(c, FR)
        assert 0 <= int(c) < CURVE_ORDER

    def test_g2_and_infinity_points(self):
        t = Transcript()
        t.append_point(b"g2", G2)
        t.append_point(b"inf", None)
        assert isinstance(t.challenge_scalar(b"c"), FR)

    def test_unsupported_point(self):
        with pytest.raises(EncodingError):
            Transcript().append_point(b"p", (1, 2))
