from textfit.config import LayoutConfig
from textfit.layout.metrics import TypeSettings, break_lines
from textfit.layout.model import Paragraph, ParagraphStyle, Story

TEXT = (
    "The quick brown fox jumps over the lazy dog while the committee "
    "deliberates typographic considerations in extraordinarily long sentences"
)


def test_empty_paragraph_has_one_line():
    assert break_lines("", 100.0, TypeSettings()) == [""]


def test_wide_column_keeps_one_line():
    assert break_lines("a few words", 1000.0, TypeSettings()) == ["a few words"]


def test_hyphenation_splits_overlong_word():
    lines = break_lines("aaaa bbbbbbbbbbbb", 40.0, TypeSettings(), hyphenate=True)
    assert lines == ["aaaa", "bbbbbbb-", "bbbbb"]


def test_without_hyphenation_overlong_word_overflows():
    lines = break_lines("aaaa bbbbbbbbbbbb", 40.0, TypeSettings(), hyphenate=False)
    assert lines == ["aaaa", "bbbbbbbbbbbb"]


def test_short_words_are_not_hyphenated():
    rules = LayoutConfig(hyphen_min_word=20)
    lines = break_lines("aaaa bbbbbbbbbbbb", 40.0, TypeSettings(), hyphenate=True, rules=rules)
    assert lines == ["aaaa", "bbbbbbbbbbbb"]


def test_line_count_is_monotone_in_each_property():
    def count(**kw):
        return len(break_lines(TEXT, 150.0, TypeSettings(**kw)))

    tracking = [count(tracking=t) for t in range(-15, 16, 5)]
    scale = [count(horizontal_scale=s) for s in range(94, 107, 2)]
    spacing = [count(letter_spacing=ls) for ls in range(-5, 6)]
    for series in (tracking, scale, spacing):
        assert series == sorted(series)


def test_paragraph_takes_style_values_unless_overridden():
    style = ParagraphStyle(name="Tight", tracking=-10.0, horizontal_scale=98.0)
    p = Paragraph(TEXT, 150.0, style=style, letter_spacing=2.0)
    assert p.tracking == -10.0
    assert p.horizontal_scale == 98.0
    assert p.letter_spacing == 2.0
    assert p.line_count == len(p.lines) > 1


def test_recompose_picks_up_property_changes():
    p = Paragraph(TEXT, 150.0, hyphenation=False)
    before = p.line_count
    p.tracking = 200.0
    p.recompose()
    assert p.line_count > before


def test_story_overset_by_capacity():
    paragraphs = [Paragraph("one line", 500.0), Paragraph("another", 500.0)]
    story = Story(paragraphs, capacity_lines=1)
    assert not story.is_overset(0)
    assert story.is_overset(1)
    assert not Story(paragraphs).is_overset(1)
    assert story.line_count == 2
