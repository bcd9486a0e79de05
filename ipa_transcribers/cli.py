"""Transcribe native text into IPA from the command line."""

import logging
import pathlib
import pprint

import click

from .constants import TRANSCRIPTION_PREFIX
from .exceptions import UnsupportedLanguageError
from .languages import Language
from .tables import BUILTIN_TABLES
from .rule_objects import save_rule_tables
from .transcribers import REGISTRY, build_registry, get_transcriber
from .utils import (
    load_config,
    load_rule_tables,
    load_wordlist,
    set_logging_config,
    transcriptions_to_df,
    gaps_to_df,
    write_table,
    ensure_path_exists,
)

CFG = {
    'language': 'es',
    'output_dir': 'data/output',
    'rules_file': None,
    'log_file': 'log.txt',
}
CONFIG_FILE = load_config("./config.py")
CFG.update(CONFIG_FILE)
CONTEXT_SETTINGS = dict(
    default_map=CFG,
    help_option_names=['-h', '--help'],
)


def configure_logging(ctx, param, verbose):
    """Configure logging level and destination based on user input."""
    log_file = CFG.get("log_file")
    if log_file:
        ensure_path_exists(pathlib.Path(log_file).resolve().parent)
    return set_logging_config(verbose, logfile=log_file)


def fetch_transcriber(registry, language):
    try:
        return get_transcriber(language, registry)
    except UnsupportedLanguageError as error:
        raise click.BadParameter(str(error), param_hint="'-l' / '--language'")


language_option = click.option(
    "-l",
    "--language",
    type=str,
    default=CFG.get("language"),
    show_default=True,
    help="Language code of the rule table to transcribe with. "
         "See the 'languages' command.",
)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option(
    "-r",
    "--rules-file",
    type=click.Path(resolve_path=True, exists=True, dir_okay=False, path_type=pathlib.Path),
    help="Python file with extra rule tables. "
         "They replace the built-in tables of the same language.",
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    callback=configure_logging,
    help="Print logging messages to the console in addition to the log file. "
         "-v is informative, -vv is detailed (for debugging)."
)
@click.pass_context
def main(ctx, rules_file, verbose):
    """Transcribe native orthography into broad IPA with ordered rewrite rules.

    Default values are read from the config.py file in the working directory,
    CLI arguments override them.
    """
    logging.info("START LOG")
    if verbose:
        click.secho("Configuration values:", fg="yellow")
        click.echo(pprint.pformat(CFG))
    if rules_file is not None:
        user_tables = list(load_rule_tables(rules_file))
        logging.info("Loaded %s rule tables from %s", len(user_tables), rules_file)
        ctx.obj = build_registry(BUILTIN_TABLES + user_tables)
    else:
        ctx.obj = REGISTRY


@main.command("languages")
@click.pass_obj
def list_languages(registry):
    """List the language codes, and the status of their rule tables."""
    for language in Language:
        transcriber = registry.get(language)
        if transcriber is None:
            click.echo(f"{language.code}\t{language.name}\tunsupported")
            continue
        click.echo(
            f"{language.code}\t{language.name}\t{transcriber.status.name}\t"
            f"{', '.join(transcriber.variants)}"
        )


@main.command("transcribe")
@language_option
@click.argument("text", nargs=-1, required=True)
@click.pass_obj
def transcribe_text(registry, language, text):
    """Print the IPA transcription of TEXT for every variant of the language."""
    transcriber = fetch_transcriber(registry, language)
    result = transcriber.transcribe(" ".join(text))
    for label, transcription in result:
        click.echo(f"{label}\t{transcription}")
    if result.gaps:
        click.secho(
            f"{len(result.gaps)} characters had no rule: "
            f"{''.join(gap.grapheme for gap in result.gaps)!r}",
            fg="yellow", err=True)


@main.command("wordlist")
@language_option
@click.argument(
    "csv_file",
    type=click.Path(resolve_path=True, exists=True, dir_okay=False, path_type=pathlib.Path),
)
@click.option(
    "-o",
    "--outfile",
    type=click.Path(resolve_path=True, dir_okay=False, path_type=pathlib.Path),
    help="Where to write the transcriptions. "
         "Defaults to transcriptions_<language>.csv in the output directory.",
)
@click.pass_obj
def transcribe_wordlist(registry, language, csv_file, outfile):
    """Transcribe the "word" column of CSV_FILE, one column per variant."""
    transcriber = fetch_transcriber(registry, language)
    words = load_wordlist(csv_file)["word"].tolist()
    click.secho(f"Transcribe {len(words)} words", fg="cyan")
    results = transcriber.transcribe_many(words)
    if outfile is None:
        out_dir = ensure_path_exists(CFG.get("output_dir"))
        outfile = out_dir / f"{TRANSCRIPTION_PREFIX}_{transcriber.language.code}.csv"
    write_table(outfile, transcriptions_to_df(words, results))
    click.echo(f"Output is in {outfile}")


@main.command("audit")
@language_option
@click.argument(
    "csv_file",
    type=click.Path(resolve_path=True, exists=True, dir_okay=False, path_type=pathlib.Path),
)
@click.option(
    "-o",
    "--outfile",
    type=click.Path(resolve_path=True, dir_okay=False, path_type=pathlib.Path),
    help="Write the report to a csv file instead of the console.",
)
@click.pass_obj
def audit_table(registry, language, csv_file, outfile):
    """Count the characters of CSV_FILE that no rule of the language covers."""
    transcriber = fetch_transcriber(registry, language)
    click.secho(
        f"Rule table {transcriber.table.name}: {transcriber.status.name}",
        fg="cyan")
    words = load_wordlist(csv_file)["word"].tolist()
    report = gaps_to_df(transcriber.transcribe_many(words))
    if outfile is not None:
        write_table(outfile, report)
    elif report.empty:
        click.echo("Every character is covered by a rule.")
    else:
        click.echo(report.to_string(index=False))


@main.command("export")
@click.option(
    "-o",
    "--output-dir",
    type=click.Path(resolve_path=True, file_okay=False, path_type=pathlib.Path),
    default=CFG.get("output_dir"),
    help="Directory to write rules.py to.",
)
def export_tables(output_dir):
    """Write the built-in rule tables to an editable rules.py file."""
    try:
        rule_file = save_rule_tables(BUILTIN_TABLES, output_dir)
    except ValueError as error:
        raise click.ClickException(str(error))
    click.echo(f"Rule tables written to {rule_file}")
