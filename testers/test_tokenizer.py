# -*- coding: utf-8 -*-
import pytest

from meshview.parsing.tokenizer import (
    MTL_DIRECTIVES, OBJ_DIRECTIVES, Line, parse_floats, tokenize,
)


def test_tokenize_skips_blank_and_comment_lines():
    text = "# header\n\nv 1 2 3\n   \n  # indented comment\nf 1 2 3\n"
    lines = list(tokenize(text))
    assert [l.keyword for l in lines] == ["v", "f"]
    assert lines[0].args == ("1", "2", "3")
    assert lines[0].lineno == 3
    assert lines[1].lineno == 6


def test_tokenize_handles_crlf_and_extra_whitespace():
    lines = list(tokenize("v\t1   2 3\r\nusemtl  Red \r\n"))
    assert lines[0] == Line("v", ("1", "2", "3"), 1)
    assert lines[1] == Line("usemtl", ("Red",), 2)


def test_tokenize_yields_unknown_keywords():
    lines = list(tokenize("foo bar\nvp 0.5\n"))
    assert [l.keyword for l in lines] == ["foo", "vp"]


def test_tokenize_drops_trailing_comment():
    lines = list(tokenize("f 1 2 3 # tri\nv 1 2 3#tail\nusemtl Red #\n"))
    assert lines[0] == Line("f", ("1", "2", "3"), 1)
    # `#` внутри токена комментарием не считается
    assert lines[1].args == ("1", "2", "3#tail")
    assert lines[2] == Line("usemtl", ("Red",), 3)


def test_directive_sets_cover_handled_keywords():
    assert {"v", "f", "usemtl", "mtllib"} <= OBJ_DIRECTIVES
    assert {"newmtl", "Ka", "Kd", "Ks", "Ke", "Ns", "Ni", "d", "illum"} <= MTL_DIRECTIVES
    assert "curv" not in OBJ_DIRECTIVES
    assert "map_Kd" not in MTL_DIRECTIVES


def test_parse_floats_takes_first_fields():
    line = Line("v", ("1.5", "-2", "3e1", "1.0"), 1)
    assert parse_floats(line, 3) == [1.5, -2.0, 30.0]


def test_parse_floats_rejects_short_or_bad_lines():
    with pytest.raises(ValueError):
        parse_floats(Line("v", ("1", "2"), 1), 3)
    with pytest.raises(ValueError):
        parse_floats(Line("v", ("1", "x", "3"), 1), 3)
