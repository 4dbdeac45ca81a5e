#!/usr/bin/env python3
"""
fitroutine CLI

Command-line front end for the routine generator.

Usage:
    fitroutine plan --age AGE --level LEVEL --goal GOAL --days DAYS
    fitroutine feedback --difficulty {easy,normal,hard}
    fitroutine nutrition --goal GOAL --calories KCAL
    fitroutine history [--limit N]
    fitroutine export [--output FILE]
    fitroutine catalog [--level LEVEL] [--goal GOAL]
"""

import logging
import sys
from typing import Optional

import click
import yaml

from fitroutine.catalog import ExperienceLevel, FitnessGoal, load_catalog
from fitroutine.config import Settings
from fitroutine.errors import AppError, ErrorType, handle_error
from fitroutine.export import export_text, format_days, format_plan_text, write_export
from fitroutine.forms import build_request, validate_form_data
from fitroutine.generator import Difficulty, RoutineGenerator
from fitroutine.progress import NutritionPreferences, ProgressStore


logger = logging.getLogger(__name__)

LEVEL_CHOICES = [level.value for level in ExperienceLevel]
GOAL_CHOICES = [goal.value for goal in FitnessGoal]
DIFFICULTY_CHOICES = [d.value for d in Difficulty]


def _fail(error: Exception, context: str):
    report = handle_error(error, context)
    click.echo(f"❌ {report.message}", err=True)
    sys.exit(1)


def _load_catalog(settings: Settings):
    """Load the configured catalog, turning file problems into an AppError."""
    path = str(settings.catalog_path) if settings.catalog_path else None
    try:
        return load_catalog(path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise AppError(
            ErrorType.GENERATION,
            f"Could not load exercise catalog {path or '(packaged)'}: {e}",
            original_error=e,
        ) from e


@click.group()
@click.option('--store', 'store_path', type=click.Path(dir_okay=False), help='Progress file (default from settings)')
@click.option('--verbose', is_flag=True, help='Debug logging')
@click.pass_context
def cli(ctx, store_path: Optional[str], verbose: bool):
    """
    fitroutine - personalized workout routines.
    """
    settings = Settings.load()
    if store_path:
        settings.storage_path = store_path

    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, settings.log_level, logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    ctx.ensure_object(dict)
    ctx.obj['settings'] = settings
    ctx.obj['store'] = ProgressStore(settings.storage_path, history_limit=settings.history_limit)


@cli.command()
@click.option('--age', type=int, required=True, help='Age in years (10-80)')
@click.option('--level', type=click.Choice(LEVEL_CHOICES), required=True, help='Experience level')
@click.option('--goal', type=click.Choice(GOAL_CHOICES), required=True, help='Fitness goal')
@click.option('--days', type=int, required=True, help='Training days per week (1-7)')
@click.option('--save/--no-save', default=True, help='Record the routine in history')
@click.pass_context
def plan(ctx, age: int, level: str, goal: str, days: int, save: bool):
    """Generate a routine, personalized with stored feedback and nutrition."""
    settings = ctx.obj['settings']
    store = ctx.obj['store']
    form = {'age': age, 'level': level, 'goal': goal, 'days': days}

    try:
        validate_form_data(form)
        request = build_request(form, store.load_progress())
        generator = RoutineGenerator(_load_catalog(settings))
        routine = generator.generate(request)

        click.echo(format_plan_text(routine, request))

        if save:
            store.record_routine(routine, request)
    except AppError as e:
        _fail(e, 'plan')


@cli.command()
@click.option('--difficulty', type=click.Choice(DIFFICULTY_CHOICES), required=True, help='How the last routine felt')
@click.pass_context
def feedback(ctx, difficulty: str):
    """Record feedback on the last routine."""
    store = ctx.obj['store']
    try:
        record = store.record_feedback(difficulty)
    except AppError as e:
        _fail(e, 'feedback')
        return

    click.echo(f"✓ Feedback saved: {record.difficulty}")
    if record.difficulty == Difficulty.EASY.value:
        click.echo("Next routine will be a bit tougher.")
    elif record.difficulty == Difficulty.HARD.value:
        click.echo("Next routine will be a bit lighter.")


@cli.command()
@click.option('--goal', type=click.Choice(GOAL_CHOICES), required=True, help='Nutrition goal')
@click.option('--calories', type=int, default=2000, show_default=True, help='Daily calories')
@click.option('--preferences', default='', help='Dietary preferences (vegetarian, vegan, ...)')
@click.option('--allergies', default='', help='Allergies or restrictions')
@click.pass_context
def nutrition(ctx, goal: str, calories: int, preferences: str, allergies: str):
    """Save nutrition preferences."""
    store = ctx.obj['store']
    prefs = NutritionPreferences(goal=goal, calories=calories, preferences=preferences, allergies=allergies)
    try:
        store.save_nutrition(prefs)
    except AppError as e:
        _fail(e, 'nutrition')
        return
    click.echo(f"✓ Nutrition plan saved: {goal} @ {calories} kcal")


@cli.command()
@click.option('--limit', default=5, help='Number of routines to show')
@click.pass_context
def history(ctx, limit: int):
    """Show recently generated routines."""
    entries = ctx.obj['store'].history()

    if not entries:
        click.echo("No routines generated yet.")
        return

    click.echo("=" * 60)
    click.echo("ROUTINE HISTORY")
    click.echo("=" * 60)

    for entry in entries[:limit]:
        req = entry.get('request', {})
        click.echo(f"\n{entry.get('date', '?')}  {req.get('level')}/{req.get('goal')}  {req.get('days')} days")
        click.echo(format_days(entry.get('routine', [])))

    click.echo("\n" + "=" * 60)


@cli.command()
@click.option('--output', type=click.Path(dir_okay=False), help='Write to file instead of stdout')
@click.pass_context
def export(ctx, output: Optional[str]):
    """Export the last routine as plain text."""
    routine = ctx.obj['store'].last_routine()
    if not routine:
        click.echo("❌ No routine to export. Run 'fitroutine plan' first.", err=True)
        sys.exit(1)

    if output:
        try:
            path = write_export(routine, output)
        except OSError as e:
            _fail(e, 'export')
            return
        click.echo(f"✓ Routine written to {path}")
    else:
        click.echo(export_text(routine))


@cli.command()
@click.option('--level', type=click.Choice(LEVEL_CHOICES), help='Only this level')
@click.option('--goal', type=click.Choice(GOAL_CHOICES), help='Only this goal')
@click.pass_context
def catalog(ctx, level: Optional[str], goal: Optional[str]):
    """List the base exercise lists."""
    settings = ctx.obj['settings']
    try:
        table = _load_catalog(settings)
    except AppError as e:
        _fail(e, 'catalog')
        return

    for entry_level, entry_goal, base in table:
        if level and entry_level.value != level:
            continue
        if goal and entry_goal.value != goal:
            continue
        click.echo(f"\n{entry_level.value} / {entry_goal.value}")
        for exercise in base:
            click.echo(f"  - {exercise}")


if __name__ == '__main__':
    cli()
