from pathlib import Path
import logging as lg

import pyparsing as pp

import intcode.compile.grammar as grammar
from intcode.runtime.cpu import ProgramSyntaxError


def parse_program(text: str) -> list[int]:
    try:
        result = grammar.program.parse_string(text, parse_all=True)

    except pp.ParseException as e:
        raise ProgramSyntaxError(
            f'Malformed program at line {e.lineno}, column {e.col}: {e.msg}'
        ) from e

    return list(result)


def load_program(filepath: str | Path) -> list[int]:
    if isinstance(filepath, str):
        filepath = Path(filepath)

    lg.debug(f'Loading program {filepath}')
    program = parse_program(filepath.read_text())
    lg.debug(f'Loaded {len(program)} words')
    return program
