"""fitting/story.py — Remove hyphenation from a story without gaining lines."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from ..layout.model import Paragraph, Story
from .fitter import FitOutcome, FitReport, TextFitter

logger = logging.getLogger(__name__)

Confirm = Callable[[str], bool]
Notify = Callable[[str], None]


@dataclass
class StoryReport:
    """Per-story tally."""

    name: str
    skipped_template: bool = False
    aborted: bool = False
    unchanged: int = 0
    overset: list[int] = field(default_factory=list)
    reports: list[tuple[int, FitReport]] = field(default_factory=list)

    @property
    def fitted(self) -> int:
        return sum(1 for _, r in self.reports if r.outcome is FitOutcome.FITS)

    @property
    def failed(self) -> list[int]:
        return [i for i, r in self.reports if r.outcome is FitOutcome.CANNOT_FIT]


def process_paragraph(paragraph: Paragraph, fitter: TextFitter) -> FitReport | None:
    """Turn hyphenation off; if that adds lines, fit back to the old count.

    Returns ``None`` when the line count did not change.
    """
    line_count = paragraph.line_count
    paragraph.hyphenation = False
    paragraph.recompose()
    if paragraph.line_count == line_count:
        return None
    return fitter.fit(paragraph, line_count)


def process_story(
    story: Story,
    fitter: TextFitter,
    confirm: Confirm | None = None,
    notify: Notify | None = None,
) -> StoryReport:
    """Process every paragraph of *story*.

    Stories on template (master) pages are left alone.  Overset paragraphs are
    skipped and reported through *notify* once the story is done.  When a
    paragraph cannot be fitted, *confirm* decides whether to go on.
    """
    report = StoryReport(name=story.name)
    if story.on_master_page:
        logger.info("Story %r lives on a master page; skipped", story.name)
        report.skipped_template = True
        return report

    for index, paragraph in enumerate(story.paragraphs):
        if story.is_overset(index):
            report.overset.append(index)
            continue

        result = process_paragraph(paragraph, fitter)
        if result is None:
            report.unchanged += 1
            continue
        report.reports.append((index, result))

        if result.outcome is FitOutcome.CANNOT_FIT:
            logger.warning("Story %r paragraph %d cannot be fixed", story.name, index)
            if confirm is not None and not confirm(
                f"Paragraph {index} of story {story.name!r} cannot be fixed.\n"
                "Do you want to continue?"
            ):
                report.aborted = True
                logger.info("Story %r aborted at paragraph %d", story.name, index)
                return report

    if report.overset:
        message = (
            f"Story {story.name!r} has overset text.\n"
            "Overset paragraphs have not been processed."
        )
        logger.warning("%s  paragraphs=%s", message.replace("\n", " "), report.overset)
        if notify is not None:
            notify(message)

    logger.info(
        "Story %r: fitted=%d failed=%d unchanged=%d overset=%d",
        story.name, report.fitted, len(report.failed), report.unchanged, len(report.overset),
    )
    return report
