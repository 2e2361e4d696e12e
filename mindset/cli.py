"""
Command line interface for running the lessons.

    mindset list
    mindset run linq open-closed
    mindset run --all
"""

import logging

import click

from . import VERSION
from .errors import UnknownLessonError
from .lessons import LESSONS, get_lesson, run_lessons

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@click.group()
@click.version_option(version=VERSION, prog_name="mindset")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Small lessons on collection transformations and SOLID design."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT
    )
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@main.command("list")
def list_lessons() -> None:
    """List the available lessons."""
    width = max(len(name) for name in LESSONS) + 2
    for current in LESSONS.values():
        click.echo(f"{current.name:<{width}}{current.title}")


@main.command()
@click.argument("names", nargs=-1)
@click.option("--all", "run_all", is_flag=True, help="Run every lesson in order")
def run(names: tuple[str, ...], run_all: bool) -> None:
    """Run one or more lessons by name."""
    if run_all:
        names = tuple(LESSONS)
    if not names:
        raise click.UsageError("Name at least one lesson, or pass --all")

    try:
        for name in names:
            get_lesson(name)
    except UnknownLessonError as ule:
        raise click.BadParameter(ule.message, param_hint="NAMES") from ule

    run_lessons(names)

