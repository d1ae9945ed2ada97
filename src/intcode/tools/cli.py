import sys
from pathlib import Path
import logging as lg

import click

import intcode.compile.loader as loader
import intcode.runtime.cpu as cpu
import intcode.runtime.emulator as emulator
import intcode.hosts.amplifiers as amplifiers
import intcode.hosts.robot as robot
import intcode.hosts.arcade as arcade


def setup_logging(verbose: bool):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)


def load_or_exit(program_filename: Path) -> list[int]:
    try:
        return loader.load_program(program_filename)

    except cpu.ProgramSyntaxError as e:
        lg.error(f'Cannot load {program_filename}: {e}')
        sys.exit(emulator.EXIT_FAULT)


@click.group()
def cli():
    pass


@cli.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('--feedback', is_flag=True, help='Loop the last amplifier back into the first')
@click.argument('program_filename', type=Path)
def amplify(verbose: bool, feedback: bool, program_filename: Path):
    setup_logging(verbose)
    program = load_or_exit(program_filename)
    phases = range(5, 10) if feedback else range(0, 5)

    try:
        signal, setting = amplifiers.best_phases(program, phases, feedback=feedback)

    except cpu.IntcodeError as e:
        lg.error(f'Amplifiers failed: {e}')
        sys.exit(emulator.EXIT_FAULT)

    click.echo(f'{signal} {",".join(str(p) for p in setting)}')


@cli.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('--white', is_flag=True, help='Start on a white panel')
@click.argument('program_filename', type=Path)
def paint(verbose: bool, white: bool, program_filename: Path):
    setup_logging(verbose)
    program = load_or_exit(program_filename)

    try:
        hull = robot.paint(program, robot.WHITE if white else robot.BLACK)

    except cpu.IntcodeError as e:
        lg.error(f'Robot failed: {e}')
        sys.exit(emulator.EXIT_FAULT)

    click.echo(len(hull))
    click.echo(robot.render(hull))


@cli.command(name='arcade')
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('--play', is_flag=True, help='Insert quarters and play until game over')
@click.argument('program_filename', type=Path)
def arcade_cmd(verbose: bool, play: bool, program_filename: Path):
    setup_logging(verbose)
    program = load_or_exit(program_filename)

    try:
        if play:
            click.echo(arcade.play(program))
        else:
            click.echo(arcade.count_blocks(program))

    except cpu.IntcodeError as e:
        lg.error(f'Arcade failed: {e}')
        sys.exit(emulator.EXIT_FAULT)


cli.add_command(emulator.run)


if __name__ == '__main__':
    cli()
