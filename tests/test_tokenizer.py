# tests/test_tokenizer.py
import pytest

from pkg_jwt.domain.exceptions import MalformedTokenError
from pkg_jwt.domain.tokenizer import split_token


def test_split_three_segments():
    segments = split_token("aaa.bbb.ccc")
    assert segments.header == "aaa"
    assert segments.payload == "bbb"
    assert segments.signature == "ccc"
    assert segments.signing_input == "aaa.bbb"
    assert str(segments) == "aaa.bbb.ccc"


def test_split_only_on_first_two_separators():
    segments = split_token("aaa.bbb.ccc.ddd")
    assert segments.signature == "ccc.ddd"
    assert segments.signing_input == "aaa.bbb"


def test_empty_segments_are_kept():
    segments = split_token("..")
    assert (segments.header, segments.payload, segments.signature) == ("", "", "")

    segments = split_token("aaa.bbb.")
    assert segments.signature == ""


@pytest.mark.parametrize("token", ["", "abc", "abc.def"])
def test_fewer_than_three_segments(token):
    with pytest.raises(MalformedTokenError):
        split_token(token)
