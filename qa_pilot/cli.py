"""Command line entry point: plan, generate and execute tests for a goal."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional, Sequence

from .config import Settings, load_settings
from .errors import QaPilotError
from .generator import existing_spec_files, generate_tests
from .llm_client import build_provider
from .models import RunOutcome, SuiteType, TestPlan
from .orchestrator import ExecutionMode, RunOrchestrator, summarize_outcomes
from .plan_cache import PlanCache
from .planner import plan_tests
from .provider import GenerationProvider

LOGGER = logging.getLogger("qa_pilot")


async def resolve_plan(
    goal: str,
    cache: PlanCache,
    provider: GenerationProvider,
    *,
    refresh: bool = False,
) -> TestPlan:
    if not refresh:
        cached = cache.load(goal)
        if cached is not None:
            LOGGER.info("Using existing test plan from %s", cache.path_for(goal))
            return cached
    LOGGER.info("Generating new test plan...")
    plan = await plan_tests(goal, provider)
    cache.save(goal, plan)
    return plan


def execute_plan(plan: TestPlan, settings: Settings, *, simulate: bool) -> List[RunOutcome]:
    mode = ExecutionMode.SIMULATED if simulate or settings.test_mode else ExecutionMode.REAL
    orchestrator = RunOrchestrator.for_mode(
        mode,
        tests_root=settings.tests_dir,
        results_dir=settings.results_dir,
        timeout_seconds=settings.spec_timeout_seconds,
        simulated_delay=settings.simulated_delay_seconds,
    )
    return orchestrator.run(plan)


def _print_outcomes(outcomes: Sequence[RunOutcome]) -> int:
    for outcome in outcomes:
        print(
            f"{outcome.status.value:<8} {outcome.suite.type.value:<4} {outcome.suite.name} "
            f"({outcome.passed_files}/{outcome.total_files} passed, "
            f"{outcome.failed_files} failed, {outcome.skipped_files} skipped)"
        )
        if outcome.error:
            print(f"         error: {outcome.error}")
    summary = summarize_outcomes(outcomes)
    print(
        f"Suites: {summary.total} total, {summary.passed} passed, "
        f"{summary.failed} failed, {summary.skipped} skipped"
    )
    return 1 if summary.failed else 0


async def _run(args: argparse.Namespace, settings: Settings) -> int:
    cache = PlanCache(settings.plans_dir)

    if args.command == "plans":
        if args.plans_action == "clear":
            cache.clear_all()
            print("All test plans cleared.")
            return 0
        entries = cache.list_all()
        if not entries:
            print("No test plans found.")
        for index, entry in enumerate(entries, start=1):
            print(f"{index}. Goal: {entry.goal}")
            print(f"   File: {entry.file_name}.json")
            print(f"   Timestamp: {entry.timestamp}")
        return 0

    if args.command == "execute":
        plan = cache.load(args.goal)
        if plan is None:
            provider = build_provider(settings)
            plan = await resolve_plan(args.goal, cache, provider)
        return _print_outcomes(execute_plan(plan, settings, simulate=args.simulate))

    provider = build_provider(settings)

    if args.command == "plan":
        plan = await resolve_plan(args.goal, cache, provider, refresh=args.refresh)
        print(json.dumps(plan.to_payload(), indent=2))
        return 0

    if args.command == "generate":
        plan = await resolve_plan(args.goal, cache, provider)
        suite_type = SuiteType(args.type)
        artifacts = await generate_tests(args.goal, plan, suite_type, provider, settings.tests_dir)
        for artifact in artifacts:
            print(artifact.path)
        return 0

    # "all": plan, generate every suite type the plan needs, then execute.
    plan = await resolve_plan(args.goal, cache, provider, refresh=args.refresh)
    for suite_type in plan.suite_types():
        if args.reuse and existing_spec_files(settings.tests_dir, suite_type):
            LOGGER.info("Reusing existing %s spec files", suite_type.value)
            continue
        await generate_tests(args.goal, plan, suite_type, provider, settings.tests_dir)
    return _print_outcomes(execute_plan(plan, settings, simulate=args.simulate))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="qa-pilot",
        description="Plan, generate and execute Playwright tests from a natural-language goal.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    plan_parser = subparsers.add_parser("plan", help="Plan tests for a goal (uses the cache).")
    plan_parser.add_argument("goal")
    plan_parser.add_argument("--refresh", action="store_true", help="Ignore any cached plan.")

    generate_parser = subparsers.add_parser("generate", help="Generate test code for a goal.")
    generate_parser.add_argument("goal")
    generate_parser.add_argument("--type", choices=["ui", "api"], required=True)

    execute_parser = subparsers.add_parser("execute", help="Execute the generated tests for a goal.")
    execute_parser.add_argument("goal")
    execute_parser.add_argument("--simulate", action="store_true", help="Use the simulated executor.")

    all_parser = subparsers.add_parser("all", help="Plan, generate and execute in one go.")
    all_parser.add_argument("goal")
    all_parser.add_argument("--simulate", action="store_true", help="Use the simulated executor.")
    all_parser.add_argument("--refresh", action="store_true", help="Ignore any cached plan.")
    all_parser.add_argument(
        "--reuse",
        action="store_true",
        help="Skip generation for suite types that already have spec files.",
    )

    plans_parser = subparsers.add_parser("plans", help="Manage cached test plans.")
    plans_parser.add_argument("plans_action", choices=["list", "clear"])
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    settings = load_settings()
    try:
        exit_code = asyncio.run(_run(args, settings))
    except QaPilotError as exc:
        LOGGER.error("%s", exc)
        exit_code = 1
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
