import pytest

from minikit.colors import color_by_name
from minikit.xpm import (
    str_str,
    str_str_quoted,
    str_to_wordtab,
    strip_comments,
    text_rgb,
    xpm_file_to_image,
    xpm_text_to_image,
    xpm_to_image,
)

SAMPLE = ["2 1 2 1", "a c #FF0000", "b c None", "ab"]


def test_wordtab_splits_on_spaces_and_tabs():
    assert str_to_wordtab("  a\tb  c ") == ["a", "b", "c"]


def test_wordtab_empty():
    assert str_to_wordtab(" \t ") == []


def test_str_str_found_and_missing():
    assert str_str("hello", "ll") == 2
    assert str_str("hello", "xy") is None


def test_str_str_quoted_skips_quoted_text():
    text = '"/*" /*'
    assert str_str_quoted(text, "/*") == text.rindex("/*")
    assert str_str_quoted('"/*"', "/*") is None


def test_str_str_quoted_rejects_empty():
    with pytest.raises(ValueError):
        str_str_quoted("abc", "")


def test_strip_block_comment_keeps_length():
    text = "a /* x */ b"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "/*" not in result and "x" not in result
    assert result.split() == ["a", "b"]


def test_strip_line_comment_blanks_newline():
    text = "x // c\ny"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "\n" not in result
    assert result.split() == ["x", "y"]


def test_strip_leaves_quoted_comments():
    text = '"a/*b*/"'
    assert strip_comments(text) == text


def test_strip_unterminated_comment():
    with pytest.raises(ValueError):
        strip_comments("a /* b")


def test_text_rgb_hex_and_names():
    assert text_rgb("#FF0000") == 0xFF0000
    assert text_rgb("light", "grey") == color_by_name("light grey")
    assert text_rgb("nosuchcolour") == 0
    assert text_rgb("None") == -1


def test_xpm_to_image_pixels():
    image = xpm_to_image(SAMPLE)
    assert (image.width, image.height) == (2, 1)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == 0xFF000000


def test_short_keys_take_last_definition():
    image = xpm_to_image(["1 1 2 1", "a c #FF0000", "a c #00FF00", "a"])
    assert image.get_pixel(0, 0) == 0x00FF00


def test_long_keys_take_first_definition():
    image = xpm_to_image(["1 1 2 3", "abc c #FF0000", "abc c #00FF00", "abc"])
    assert image.get_pixel(0, 0) == 0xFF0000


def test_text_form_matches_list_form():
    text = (
        "/* XPM */\n"
        "static char *img[] = {\n"
        "// header\n"
        '"2 1 2 1",\n'
        '"a c #FF0000",\n'
        '"b c None", /* transparent */\n'
        '"ab"};\n'
    )
    image = xpm_text_to_image(text)
    expected = xpm_to_image(SAMPLE)
    assert image.data == expected.data


def test_file_form(tmp_path):
    path = tmp_path / "img.xpm"
    path.write_text("".join(f'"{line}",\n' for line in SAMPLE))
    assert xpm_file_to_image(path).data == xpm_to_image(SAMPLE).data


def test_zero_width_is_rejected():
    with pytest.raises(ValueError):
        xpm_to_image(["0 1 1 1", "a c #FF0000", "a"])


def test_missing_rows_are_rejected():
    with pytest.raises(ValueError):
        xpm_to_image(["1 2 1 1", "a c #FF0000", "a"])


def test_colour_line_without_c_is_rejected():
    with pytest.raises(ValueError):
        xpm_to_image(["1 1 1 1", "a s #FF0000", "a"])