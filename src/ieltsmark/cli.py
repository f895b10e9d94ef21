"""CLI entry point for ieltsmark."""

import logging
from pathlib import Path

import click

from ieltsmark.config.settings import Settings


@click.group()
@click.option("--verbose", is_flag=True, help="Log which marking rule accepted each answer")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: ~/.ieltsmark/config.yaml)",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, config_path: Path) -> None:
    """ieltsmark: mark IELTS-style answers the way an examiner would."""
    settings = Settings.load(config_path)
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


@main.command()
@click.argument("answer")
@click.argument("key")
@click.option("--type", "question_type", default=None, help="Question type, e.g. MULTIPLE_CHOICE_MULTIPLE")
def check(answer: str, key: str, question_type: str) -> None:
    """Check ANSWER against the answer KEY, e.g. '(the) hospital/clinic'."""
    from ieltsmark.engine.validator import check_answer

    verdict = check_answer(answer, key, question_type)
    click.echo("correct" if verdict else "incorrect")


@main.command()
@click.argument("text")
@click.option("--max-words", type=int, default=None, help="Word limit to check against")
@click.option("--max-numbers", type=int, default=None, help="Number limit to check against")
def count(text: str, max_words: int, max_numbers: int) -> None:
    """Count the words and numbers in TEXT."""
    from ieltsmark.engine.word_count import count_words, validate_word_limit

    result = count_words(text)
    click.echo(f"words: {result.words}")
    click.echo(f"numbers: {result.numbers}")
    if max_words is not None:
        limit = validate_word_limit(text, max_words, max_numbers)
        click.echo("within limit" if limit.valid else "over limit")


@main.command()
@click.argument("sheet", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("answers", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def grade(ctx: click.Context, sheet: Path, answers: Path) -> None:
    """Grade the ANSWERS file against the answer SHEET."""
    from ieltsmark.engine.scoring import grade_test, with_default_limits
    from ieltsmark.engine.sheet_loader import load_answers, load_sheet

    marking = ctx.obj["settings"].marking
    try:
        answer_sheet = load_sheet(sheet)
        candidate = load_answers(answers)
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    questions = with_default_limits(
        answer_sheet.questions, marking.default_max_words, marking.default_max_numbers
    )
    result = grade_test(
        questions,
        candidate,
        test_id=answer_sheet.id,
        enforce_word_limit=marking.enforce_word_limits,
    )

    for r in result.question_results:
        mark = "✓" if r.is_correct else "✗"
        note = " (over word limit)" if r.over_limit else ""
        click.echo(f"  {r.question_number:>3} {mark} {r.user_answer or '-'}  [{r.correct_answer}]{note}")
    click.echo(
        f"Score: {result.score}/{result.total_questions} ({result.percentage}%)"
        f"  Band: {result.band_score}"
    )


@main.command()
@click.option("--init", is_flag=True, help="Write the current settings to the config file")
@click.pass_context
def config(ctx: click.Context, init: bool) -> None:
    """Show (or write) the marking configuration."""
    settings: Settings = ctx.obj["settings"]
    if init:
        path = settings.save()
        click.echo(f"Wrote {path}")
        return
    marking = settings.marking
    click.echo(f"enforce_word_limits: {marking.enforce_word_limits}")
    click.echo(f"default_max_words: {marking.default_max_words}")
    click.echo(f"default_max_numbers: {marking.default_max_numbers}")
    click.echo(f"log_level: {settings.get_log_level()}")
