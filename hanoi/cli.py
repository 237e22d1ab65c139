#!/usr/bin/env python3
import sys
import time
import logging
from typing import Optional

import click

from hanoi.config import settings
from hanoi.constants import DEFAULT_DISKS, MAX_DISKS_ARG, WARN_ABOVE_DISKS
from hanoi.exceptions import HanoiError
from hanoi.logging import setup_logging
from hanoi.moves import Move
from hanoi.results import SolveResult, get_summary_table
from hanoi.solver import solve
from hanoi.theme import console

logger = logging.getLogger("hanoi.cli")


def resolve_disks(raw: Optional[int]) -> int:
    """Apply the input rules to the raw argument, echoing any notice."""
    default = DEFAULT_DISKS
    if raw is None:
        click.echo(f"No disk count given, taking default {default} disks.")
        return default
    disks = abs(raw)
    if disks < 1:
        click.echo(f"Disks count {disks} does not sound correct. You need at least one disk. "
                   f"Will keep default {default} disks.")
        return default
    if disks > WARN_ABOVE_DISKS:
        click.echo("Large number of disks may take long to move. Working on it, be patient....")
    return disks


def timed_solve(disks: int, dump: Optional[bool] = None, record: bool = False) -> SolveResult:
    """Run the solver and attach the wall clock time it took, in microseconds."""
    start = time.perf_counter_ns()
    result = solve(disks, dump=dump, record=record)
    result.elapsed_us = (time.perf_counter_ns() - start) // 1000
    return result


@click.group()
def cli():
    """Greedy iterative Towers of Hanoi solver."""
    pass


@cli.command("solve", context_settings=dict(ignore_unknown_options=True))
@click.argument("disks", type=click.IntRange(-MAX_DISKS_ARG, MAX_DISKS_ARG), required=False)
@click.option("--dump/--no-dump", default=None, help="Print the board before every iteration of the solver.")
@click.option("--show-moves", is_flag=True, help="List every move before the summary.")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v INFO, -vv DEBUG, -vvv TRACE)")
def solve_cmd(disks: Optional[int], dump: Optional[bool], show_moves: bool, verbose: int):
    """
    Move DISKS disks from peg A to peg C and report the move count.

    DISKS may be negative, its absolute value is used.
    """
    setup_logging(verbose, settings.app.log_level)
    logger.debug(f"CLI args: disks={disks}, dump={dump}, show_moves={show_moves}")
    count = resolve_disks(disks)

    try:
        result = timed_solve(count, dump=dump, record=show_moves)
    except HanoiError as e:
        logger.error(f"A handled error occurred: {e}", exc_info=False)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Interrupted, exiting.")
        sys.exit(1)

    if show_moves:
        for i, (src, dst) in enumerate(result.sequence, 1):
            click.echo(f"{i}: {Move(src, dst)}")
    click.echo(result.summary_line())
    click.echo(result.timing_line())


@cli.command("bench")
@click.option("--max-disks", "-k", type=click.IntRange(min=1), default=None,
              help=f"Solve 1..K disks (default: {settings.bench.max_disks}).")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v INFO, -vv DEBUG, -vvv TRACE)")
def bench_cmd(max_disks: Optional[int], verbose: int):
    """
    Solve every disk count up to K and show moves and timings as a table.
    """
    setup_logging(verbose, settings.app.log_level)
    max_disks = max_disks or settings.bench.max_disks
    results = []
    try:
        for n in range(1, max_disks + 1):
            results.append(timed_solve(n, dump=False))
            logger.info("%d disks: %d moves in %d us", n, results[-1].moves, results[-1].elapsed_us)
    except HanoiError as e:
        logger.error(f"A handled error occurred: {e}", exc_info=False)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    console.print(get_summary_table(results))
    off = [r.disks for r in results if not r.optimal]
    if off:
        logger.warning("Move count differs from 2^N - 1 for N in %s", off)
        sys.exit(1)


if __name__ == "__main__":
    cli()
