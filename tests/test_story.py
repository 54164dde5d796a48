from textfit.fitting.fitter import FitOutcome, TextFitter
from textfit.fitting.story import process_paragraph, process_story
from textfit.layout.model import Story


def test_unchanged_paragraph_returns_none(short):
    assert process_paragraph(short, TextFitter()) is None
    assert short.hyphenation is False


def test_paragraph_refitted_to_previous_count(fittable):
    assert fittable.line_count == 2
    report = process_paragraph(fittable, TextFitter())
    assert report.outcome is FitOutcome.FITS
    assert report.target_lines == 2
    assert fittable.line_count == 2
    assert fittable.hyphenation is False


def test_story_continues_after_confirmation(fittable, unfittable, short):
    prompts = []

    def confirm(msg):
        prompts.append(msg)
        return True

    story = Story([fittable, unfittable, short], name="body")
    report = process_story(story, TextFitter(), confirm=confirm)
    assert report.fitted == 1
    assert report.failed == [1]
    assert report.unchanged == 1
    assert not report.aborted
    assert len(prompts) == 1 and "cannot be fixed" in prompts[0]


def test_story_aborts_when_declined(fittable, unfittable, short):
    story = Story([unfittable, fittable, short])
    report = process_story(story, TextFitter(), confirm=lambda msg: False)
    assert report.aborted
    assert report.failed == [0]
    # Later paragraphs were not touched.
    assert fittable.hyphenation is True
    assert short.hyphenation is True


def test_master_page_story_is_skipped(fittable):
    story = Story([fittable], on_master_page=True)
    report = process_story(story, TextFitter())
    assert report.skipped_template
    assert report.reports == []
    assert fittable.hyphenation is True


def test_overset_paragraphs_are_skipped_and_reported(fittable, unfittable, short):
    notes = []
    story = Story([fittable, unfittable, short], capacity_lines=2, name="tight")
    report = process_story(story, TextFitter(), notify=notes.append)
    assert report.overset == [1, 2]
    assert report.fitted == 1
    assert unfittable.hyphenation is True
    assert len(notes) == 1 and "overset" in notes[0]
