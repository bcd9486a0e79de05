"""Utility functions for ipa_transcribers"""

import importlib.util
import logging
import sys
from collections import Counter
from pathlib import Path
from typing import Union, Iterable, Generator, Dict

import autopep8
import pandas as pd
from schema import SchemaError

from .constants import rule_table_schema, wordlist_schema, wordlist_column_names


def ensure_path_exists(path):
    """Make sure a directory exists and is a Path object."""
    path_obj = Path(path)
    path_obj.mkdir(exist_ok=True, parents=True)
    return path_obj


def resolve_rel_path(file_rel_path: Union[str, Path]) -> Path:
    """Resolve the full path from a potential relative path to the local or parent directory."""

    full_path = Path(file_rel_path).resolve()
    if not full_path.exists():
        full_path = Path.cwd().parent / file_rel_path
    return full_path


def load_module_from_path(file_path):
    """Use importlib to load a module from a .py file path."""
    module_path = resolve_rel_path(file_path)
    assert module_path.suffix == ".py", (
            f"Inappropriate file type: {module_path.suffix} ({file_path})")
    module_name = module_path.stem

    spec = importlib.util.spec_from_file_location(module_name, module_path)
    module = importlib.util.module_from_spec(spec)
    sys.modules[spec.name] = module
    spec.loader.exec_module(module)
    return module


def load_module_dict(module_path) -> Dict:
    """Load a dict of the public variables defined in a python module, ``{var_name:value}``."""
    module = load_module_from_path(module_path)
    module_dict = module.__dict__
    return {
        key: value for key, value in module_dict.items()
        if value and not key.startswith("_")
    }


def load_config(filename):
    """Load variable names (lower case) and their values as a dict from a .py file."""
    try:
        return {k.lower(): v for k, v in load_module_dict(filename).items()}
    except FileNotFoundError:
        return {}


def load_rule_tables(file_path: Union[str, Path]) -> Generator:
    """Load rule table dicts from a .py file and validate them.

    Variables that aren't dicts are ignored,
    invalid tables are logged and skipped.
    """
    variables = load_module_dict(file_path)

    for name, table_dict in variables.items():
        if not isinstance(table_dict, dict):
            continue
        try:
            rule_table_schema.validate(table_dict)
        except SchemaError as error:
            logging.error("SKIPPING RULE TABLE %s BECAUSE OF %s", name, type(error))
            logging.error("Error message: %s", error)
            continue
        yield table_dict


def format_rule_tables(table_dicts: Iterable) -> str:
    """Format code that assigns each rule table dict to a variable named after it."""
    code = ""
    for table_dict in table_dicts:
        variable = table_dict["name"].replace("-", "_")
        code += (
            f"\n"
            f"{variable} = {table_dict!r}"
            f"\n")
    return autopep8.fix_code(code, options={'aggressive': 2})


def load_wordlist(csv_path: Union[str, Path]) -> pd.DataFrame:
    """Load a csv file with a "word" column into a validated DataFrame."""
    full_path = resolve_rel_path(csv_path)
    words = pd.read_csv(
        full_path, header=0, index_col=None,
        usecols=lambda x: x in wordlist_column_names,
        dtype=str,
    )
    return wordlist_schema.validate(words)


def transcriptions_to_df(words: Iterable[str], results: Iterable) -> pd.DataFrame:
    """Tabulate transcription results, one column per variant label."""
    data_dict: dict = {"word": []}
    gap_counts = []
    for word, result in zip(words, results):
        data_dict["word"].append(word)
        for label, text in result:
            data_dict.setdefault(label, []).append(text)
        gap_counts.append(len(result.gaps))
    data_dict["gaps"] = gap_counts
    return pd.DataFrame(data_dict)


def gaps_to_df(results: Iterable) -> pd.DataFrame:
    """Count the graphemes that no rule covered, most frequent first."""
    counts = Counter(gap.grapheme for result in results for gap in result.gaps)
    return pd.DataFrame(
        counts.most_common(), columns=["grapheme", "count"]
    )


def write_table(output_file: Union[str, Path], data: pd.DataFrame, delimiter: str = ","):
    """Write a DataFrame to a csv file."""
    logging.info("Write data to %s", output_file)
    data.to_csv(output_file, header=True, index=False, sep=delimiter)


def log_level(verbosity: int):
    """Calculate the log level given by the number of -v flags.

    0 = logging.WARNING (30)
    1 = logging.INFO (20)
    2 = logging.DEBUG (10)
    """
    return (3 - verbosity) * 10 if verbosity in (0, 1, 2) else 10


def set_logging_config(verbose=False, logfile="log.txt"):
    """Configure logging level and destination based on user input."""
    logging.basicConfig(
        level=logging.DEBUG,
        format=(
            "%(asctime)s | %(levelname)s "
            "| %(module)s-%(funcName)s-%(lineno)04d | %(message)s"),
        datefmt='%Y-%m-%d %H:%M',
        filename=logfile,
        filemode='a')

    if verbose:
        # define a Handler which writes log messages to stderr
        console = logging.StreamHandler()
        console.setLevel(log_level(verbose))
        # set a format which is simpler for console use
        formatter = logging.Formatter(
            '%(asctime)-10s | %(levelname)s | %(message)s')
        console.setFormatter(formatter)
        logging.getLogger('').addHandler(console)

    return verbose
