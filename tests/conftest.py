import pytest

from textfit.layout.model import Paragraph

# Ten-letter words of 5.2 pt each at 10 pt / 100 %.  With hyphenation the
# paragraph sets in two lines; without it, in three.  At 143 pt the tightest
# setting brings three words back onto the first line, at 140 pt it cannot.
WORDS = " ".join(["aaaaaaaaaa"] * 5)


@pytest.fixture
def fittable():
    return Paragraph(WORDS, 143.0)


@pytest.fixture
def unfittable():
    return Paragraph(WORDS, 140.0)


@pytest.fixture
def short():
    return Paragraph("aaaa", 143.0)
