import sys
from pathlib import Path
import logging as lg
import traceback
from typing import Iterable, Tuple

import click

from intcode.common.vmconf import MachineSettings
import intcode.compile.loader as loader
import intcode.runtime.cpu as cpu


EXIT_HALT = 0
EXIT_FAULT = 1
EXIT_KEYBOARD = 3
EXIT_STARVED = 4
EXIT_EXEC_ERROR = 100


def run_program(
    program: Iterable[int],
    inputs: Iterable[int] = (),
    settings: MachineSettings | None = None
) -> list[int]:
    proc = cpu.Computer(program, settings)
    proc.push_inputs(inputs)
    return drain(proc)


def drain(proc: cpu.Computer) -> list[int]:
    outputs = []

    while True:
        result = proc.run()

        if isinstance(result, cpu.Output):
            outputs.append(result.value)
            continue

        if isinstance(result, cpu.NeedInput):
            raise cpu.InputExhausted(f'Program needs more input at IP:{proc.ip}')

        return outputs


def run_patched(
    program: Iterable[int],
    patches: dict[int, int],
    settings: MachineSettings | None = None
) -> cpu.Computer:
    proc = cpu.Computer(program, settings)

    for addr, value in patches.items():
        proc.poke_memory(addr, value)

    drain(proc)
    return proc


def search_noun_verb(program: list[int], target: int, span: Iterable[int] = range(100)) -> int:
    candidates = list(span)

    for noun in candidates:
        for verb in candidates:
            proc = run_patched(program, {1: noun, 2: verb})

            if proc.peek_memory(0) == target:
                lg.info(f'Found noun {noun} and verb {verb}')
                return 100 * noun + verb

    raise LookupError(f'No noun and verb produce {target}')


def parse_patch(text: str) -> Tuple[int, int]:
    addr, sep, value = text.partition('=')

    if not sep:
        raise click.BadParameter(f'Patch {text} is not in ADDR=VALUE form')

    try:
        return int(addr), int(value)

    except ValueError:
        raise click.BadParameter(f'Patch {text} is not in ADDR=VALUE form')


def execute(program: list[int], inputs: list[int], patches: dict[int, int], settings: MachineSettings):
    proc = cpu.Computer(program, settings)

    for addr, value in patches.items():
        proc.poke_memory(addr, value)

    proc.push_inputs(inputs)

    for value in drain(proc):
        click.echo(value)

    if patches and proc.output is None:
        click.echo(proc.peek_memory(0))


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('-i', '--input', 'inputs', type=int, multiple=True, help='Value for the input queue')
@click.option('-p', '--patch', 'patches', multiple=True, help='Memory patch ADDR=VALUE')
@click.option('--config', type=click.Path(exists=True, path_type=Path), help='Machine settings file')
@click.argument('program_filename', type=Path)
def run(verbose: bool, inputs: Tuple[int], patches: Tuple[str], config: Path | None, program_filename: Path):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)
    lg.info('INTCODE')

    try:
        settings = MachineSettings() if config is None else MachineSettings.from_toml(config)
        program = loader.load_program(program_filename)
        execute(program, list(inputs), dict(parse_patch(p) for p in patches), settings)
        lg.info('Execution halted gracefully')
        sys.exit(EXIT_HALT)

    except click.BadParameter:
        raise

    except (cpu.MachineFault, cpu.StepLimitExceeded, cpu.ProgramSyntaxError) as e:
        lg.error(f'Execution halted on fault: {e}')
        sys.exit(EXIT_FAULT)

    except cpu.InputExhausted as e:
        lg.error(f'Execution starved: {e}')
        sys.exit(EXIT_STARVED)

    except KeyboardInterrupt:
        lg.info('Execution halted by the user')
        sys.exit(EXIT_KEYBOARD)

    except Exception as e:
        lg.info(f'Execution halted on general error {e}')
        traceback.print_exc()
        sys.exit(EXIT_EXEC_ERROR)


if __name__ == '__main__':
    run()
