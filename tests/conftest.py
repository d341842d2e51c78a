# tests/conftest.py

"""Shared fixtures: synthetic FIGlet fonts written to temporary directories."""

import pytest

# Two-row glyphs used by the end-to-end rendering tests.
BLOCKY_GLYPHS = {
    "A": ["$/\\$", "/--\\"],
    "B": ["|~)", "|_)"],
}


def make_font_lines(height=2, comment_lines=1, glyphs=None, hard_blank="$", last_code_point=126):
    """Build the lines of a font file.

    Every code point from 32 to last_code_point gets a glyph; unless given in
    glyphs, each row of it reads as the zero padded code point ("065").
    """
    glyphs = glyphs or {}
    lines = [f"flf2a{hard_blank} {height} {height} 10 0 {comment_lines}\n"]
    lines += [f"comment line {i}\n" for i in range(comment_lines)]
    for code_point in range(32, last_code_point + 1):
        rows = glyphs.get(chr(code_point), [f"{code_point:03d}"] * height)
        for index, row in enumerate(rows):
            end = "@@" if index == height - 1 else "@"
            lines.append(f"{row}{end}\n")
    return lines


def write_font(directory, name, lines):
    path = directory / f"{name}.flf"
    path.write_text("".join(lines))
    return path


@pytest.fixture
def font_lines():
    """Factory building font file lines."""
    return make_font_lines


@pytest.fixture
def font_dir(tmp_path):
    """A directory holding the 'blocky' (2 rows) and 'digits' (3 rows) fonts."""
    directory = tmp_path / "fonts"
    directory.mkdir()
    write_font(directory, "blocky", make_font_lines(glyphs=BLOCKY_GLYPHS))
    write_font(directory, "digits", make_font_lines(height=3, comment_lines=2))
    return directory


class CountingReader:
    """read_lines collaborator that records every font file it reads."""

    def __init__(self, lines_by_name):
        self.lines_by_name = lines_by_name
        self.calls = []

    def __call__(self, path):
        self.calls.append(path)
        return self.lines_by_name[path.stem]


@pytest.fixture
def counting_reader():
    """Reader serving the blocky and digits fonts from memory."""
    return CountingReader({
        "blocky": make_font_lines(glyphs=BLOCKY_GLYPHS),
        "digits": make_font_lines(height=3, comment_lines=2),
    })
