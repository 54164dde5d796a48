"""
main.py — Remove hyphenation from a document without letting paragraphs grow.

Usage
-----
    python -m textfit.main document.json \
        --output fitted.json \
        --story 0 \
        --tolerance 0.05 \
        --db textfit_results.sqlite

For every paragraph of the selected stories:
    1. Note the current line count.
    2. Turn hyphenation off and recompose.
    3. If the paragraph gained lines, search tracking / horizontal scale /
       letter spacing for a setting that brings it back to the old count.
    4. If no setting works, restore the paragraph and ask whether to go on.
"""

from __future__ import annotations

import argparse
import logging
import sys

from .config import FitConfig, LayoutConfig, SearchConfig
from .fitting.fitter import TextFitter
from .fitting.story import StoryReport, process_story
from .layout.document import DocumentError, dump_document, load_document
from .store.results import ResultsDB

logger = logging.getLogger("textfit")


def _ask(message: str) -> bool:
    answer = input(f"{message} [y/N] ").strip().lower()
    return answer in ("y", "yes")


def _tell(message: str) -> None:
    print(message)


def _positive_float(text: str) -> float:
    value = float(text)
    if not value > 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {text}")
    return value


def run(
    document_path: str,
    output_path: str | None,
    cfg: FitConfig,
    story_index: int | None = None,
    assume_yes: bool = False,
    db_path: str | None = None,
) -> list[StoryReport]:
    """Process a document file and return one report per processed story."""
    doc = load_document(document_path, rules=cfg.layout)
    if story_index is not None:
        if not 0 <= story_index < len(doc.stories):
            raise DocumentError(
                f"story index {story_index} out of range (document has {len(doc.stories)})"
            )
        stories = [(story_index, doc.stories[story_index])]
    else:
        stories = list(enumerate(doc.stories))

    fitter = TextFitter(cfg)
    db = ResultsDB(db_path) if db_path else None
    confirm = (lambda _msg: True) if assume_yes else _ask

    logger.info(
        "═══ TEXTFIT START ═══  stories=%d  axes=%s  tolerance=%.3f  carry_rotation=%s",
        len(stories), list(cfg.axis_names), cfg.search.min_size_fraction,
        cfg.search.carry_rotation,
    )

    reports: list[StoryReport] = []
    try:
        for s_idx, story in stories:
            try:
                report = process_story(story, fitter, confirm=confirm, notify=_tell)
            except Exception:
                logger.exception("Story %d (%r) failed; skipping.", s_idx, story.name)
                continue
            reports.append(report)
            if db is not None:
                for p_idx, fit in report.reports:
                    db.insert(story.name, p_idx, fit, cfg.axis_names)
            if report.aborted:
                break
    finally:
        if db is not None:
            logger.info("Results DB summary: %s", db.summary())
            db.close()

    logger.info("═══ TEXTFIT COMPLETE ═══")
    for r in reports:
        logger.info(
            "  %-20s fitted=%d  failed=%s  unchanged=%d  overset=%d%s",
            r.name, r.fitted, r.failed, r.unchanged, len(r.overset),
            "  (template, skipped)" if r.skipped_template else "",
        )

    if output_path:
        dump_document(doc, output_path)
    return reports


# ── CLI ────────────────────────────────────────────────────────────

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="textfit",
        description="Turn off hyphenation and refit paragraphs to their original line count",
    )
    parser.add_argument("document", help="Path to the JSON document")
    parser.add_argument("--output", default=None, help="Where to write the adjusted document")
    parser.add_argument("--story", type=int, default=None, help="Only process this story index")
    parser.add_argument("--yes", action="store_true", help="Continue past unfittable paragraphs")
    parser.add_argument("--tolerance", type=_positive_float, default=0.05,
                        help="Refinement floor as a fraction of each axis range")
    parser.add_argument("--carry-rotation", action="store_true",
                        help="Carry the axis rotation counter across paragraphs")
    parser.add_argument("--db", default=None, help="SQLite ledger of fit results")
    parser.add_argument("--log-file", default="textfit.log")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if args.log_file:
        handlers.append(logging.FileHandler(args.log_file))
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
    )

    cfg = FitConfig(
        search=SearchConfig(
            min_size_fraction=args.tolerance,
            carry_rotation=args.carry_rotation,
        ),
        layout=LayoutConfig(),
    )

    try:
        reports = run(
            args.document,
            args.output,
            cfg,
            story_index=args.story,
            assume_yes=args.yes,
            db_path=args.db,
        )
    except (DocumentError, OSError) as exc:
        logger.error("%s", exc)
        return 2
    return 1 if any(r.aborted for r in reports) else 0


if __name__ == "__main__":
    sys.exit(main())
