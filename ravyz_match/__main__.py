"""Command line entry point for ravyz-match."""

import argparse
import asyncio
import json
import sys
from pathlib import Path

from pydantic import ValidationError

from ravyz_match import __version__
from ravyz_match.config.settings import Settings
from ravyz_match.utils.logging import configure_logging


def _print_json(payload: object) -> None:
    def _default(value: object):
        to_dict = getattr(value, "to_dict", None)
        if callable(to_dict):
            return to_dict()
        model_dump = getattr(value, "model_dump", None)
        if callable(model_dump):
            return model_dump(mode="json")
        return str(value)

    print(json.dumps(payload, indent=2, ensure_ascii=False, default=_default))


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="ravyz-match",
        description="RAVYZ: behavioral assessment and candidate/job matching",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m ravyz_match assess responses.yaml
  python -m ravyz_match match candidate.yaml job.yaml --strategy legacy
  python -m ravyz_match narrative Protagonista
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set the log level (overrides settings)",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description="Available commands",
    )

    assess_parser = subparsers.add_parser(
        "assess",
        help="Score questionnaire answers and classify the archetype",
    )
    assess_parser.add_argument(
        "responses",
        type=Path,
        help="Path to a YAML/JSON mapping of question id to answer (1-5)",
    )
    assess_parser.add_argument("--json", action="store_true", help="Print JSON output")

    match_parser = subparsers.add_parser(
        "match",
        help="Score a candidate against one or more jobs",
    )
    match_parser.add_argument("candidate", type=Path, help="Candidate profile (YAML or JSON)")
    match_parser.add_argument(
        "jobs",
        type=Path,
        nargs="+",
        help="One or more job profiles (YAML or JSON)",
    )
    match_parser.add_argument(
        "--strategy",
        choices=["hybrid", "behavioral", "legacy"],
        default=None,
        help="Scoring model (defaults to the DEFAULT_STRATEGY setting)",
    )
    match_parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Score jobs on this many worker threads",
    )
    match_parser.add_argument(
        "--save",
        action="store_true",
        help="Store results, reusing any that have not expired",
    )
    match_parser.add_argument(
        "--db",
        type=Path,
        default=None,
        help="Results database path (defaults to RESULTS_DB_PATH)",
    )
    match_parser.add_argument("--json", action="store_true", help="Print JSON output")

    narrative_parser = subparsers.add_parser(
        "narrative",
        help="Show strengths, risks and recommendations for an archetype",
    )
    narrative_parser.add_argument("archetype", help="Archetype name, e.g. Protagonista")

    results_parser = subparsers.add_parser(
        "results",
        help="Inspect stored match results",
    )
    results_parser.add_argument(
        "--db",
        type=Path,
        default=None,
        help="Results database path (defaults to RESULTS_DB_PATH)",
    )
    results_subparsers = results_parser.add_subparsers(dest="results_cmd", required=True)

    results_list = results_subparsers.add_parser("list", help="List fresh results")
    target = results_list.add_mutually_exclusive_group(required=True)
    target.add_argument("--candidate", default=None, help="Candidate id")
    target.add_argument("--job", default=None, help="Job id")
    results_list.add_argument("--strategy", default=None, help="Filter by strategy")
    results_list.add_argument(
        "--min-score", type=int, default=None, help="Only results scoring at least this much"
    )
    results_list.add_argument("--limit", type=int, default=None, help="Maximum results to list")

    results_subparsers.add_parser("purge", help="Delete expired results")

    return parser


def _run_assess(parsed: argparse.Namespace) -> int:
    from ravyz_match.assessment import ResponseValidationError, assess, get_archetype_narrative
    from ravyz_match.matching.profile import ProfileLoader

    try:
        responses = ProfileLoader().load_responses(parsed.responses)
        outcome = assess(responses)
    except (FileNotFoundError, ValueError) as e:
        # ResponseValidationError is a ValueError
        kind = "Invalid responses" if isinstance(e, ResponseValidationError) else "Error"
        print(f"{kind}: {e}", file=sys.stderr)
        return 1

    result = outcome.archetype
    if parsed.json:
        _print_json(
            {
                "pillar_scores": outcome.pillar_scores,
                "archetype": result.archetype,
                "confidence": result.confidence,
                "dominant_pillars": [list(pair) for pair in result.dominant_pillars],
                "description": result.description,
                "warnings": outcome.warnings,
            }
        )
        return 0

    print("Pillar scores:")
    for pillar, score in outcome.pillar_scores.present().items():
        print(f"  {pillar}: {score:.2f}")
    print(f"Archetype: {result.archetype} (confidence: {result.confidence})")
    print(f"Profile: {get_archetype_narrative(result.archetype).title}")
    print(result.description)
    for warning in outcome.warnings:
        print(f"Warning: {warning}")
    return 0


async def _match_and_store(parsed, settings, matching, candidate, jobs) -> list:
    from ravyz_match.results import MatchResultRepository, MatchResultService

    repo = MatchResultRepository(parsed.db or settings.results_db_path)
    await repo.initialize()
    try:
        service = MatchResultService(repo, matching)
        return await service.get_or_compute_many(
            candidate, jobs, strategy=parsed.strategy, max_workers=parsed.workers
        )
    finally:
        await repo.close()


def _run_match(parsed: argparse.Namespace, settings: Settings) -> int:
    from ravyz_match.matching import MatchingService, ProfileLoader

    loader = ProfileLoader()
    try:
        candidate = loader.load_candidate(parsed.candidate)
        jobs = [loader.load_job(path) for path in parsed.jobs]
    except (FileNotFoundError, ValueError, ValidationError) as e:
        print(f"Error loading profiles: {e}", file=sys.stderr)
        return 1

    matching = MatchingService(default_strategy=settings.default_strategy)
    if parsed.save:
        results = asyncio.run(_match_and_store(parsed, settings, matching, candidate, jobs))
    else:
        results = matching.match_jobs(
            candidate, jobs, strategy=parsed.strategy, max_workers=parsed.workers
        )

    if parsed.json:
        _print_json(results)
        return 0

    for result in results:
        print(f"{result.job_id}: {result.final_score}/100 [{result.strategy}]")
        print(f"  {result.explanation}")
    return 0


def _run_narrative(parsed: argparse.Namespace) -> int:
    from ravyz_match.assessment.archetypes import ARCHETYPE_NARRATIVES, get_archetype_narrative

    if parsed.archetype not in ARCHETYPE_NARRATIVES:
        print(f"No dedicated narrative for '{parsed.archetype}', showing the generic one.")
    narrative = get_archetype_narrative(parsed.archetype)
    print(narrative.title)
    for heading, items in (
        ("Strengths", narrative.strengths),
        ("Risks", narrative.risks),
        ("Recommendations", narrative.recommendations),
    ):
        print(f"\n{heading}:")
        for item in items:
            print(f"  - {item}")
    return 0


async def _results_command(parsed: argparse.Namespace, settings: Settings) -> int:
    from ravyz_match.results import MatchResultRepository

    repo = MatchResultRepository(parsed.db or settings.results_db_path)
    await repo.initialize()
    try:
        if parsed.results_cmd == "purge":
            removed = await repo.delete_expired()
            print(f"Deleted {removed} expired result(s)")
            return 0

        if parsed.candidate:
            records = await repo.list_for_candidate(
                parsed.candidate,
                strategy=parsed.strategy,
                min_score=parsed.min_score,
                limit=parsed.limit,
            )
        else:
            records = await repo.list_for_job(
                parsed.job,
                strategy=parsed.strategy,
                min_score=parsed.min_score,
                limit=parsed.limit,
            )
        for rec in records:
            print(
                f"{rec.calculated_at.isoformat()} {rec.strategy} {rec.candidate_id} "
                f"{rec.job_id} {rec.final_score}"
            )
        return 0
    finally:
        await repo.close()


def main(args: list[str] | None = None) -> int:
    """Main entry point for the application.

    Args:
        args: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    # Load settings
    try:
        settings = Settings()
    except ValidationError as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    # Configure logging
    log_level = parsed.log_level or settings.log_level
    logger = configure_logging(level=log_level, log_file=settings.log_file)

    # If no command specified, show help
    if parsed.command is None:
        parser.print_help()
        return 0

    logger.debug("ravyz-match v%s running %s", __version__, parsed.command)

    if parsed.command == "assess":
        return _run_assess(parsed)
    if parsed.command == "match":
        return _run_match(parsed, settings)
    if parsed.command == "narrative":
        return _run_narrative(parsed)
    if parsed.command == "results":
        return asyncio.run(_results_command(parsed, settings))

    return 0


if __name__ == "__main__":
    sys.exit(main())
