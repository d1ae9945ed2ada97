''' Amplifier pipelines: several machines joined output to input '''

import logging as lg
from itertools import permutations
from typing import Sequence, Tuple

import intcode.runtime.cpu as cpu


def make_amplifiers(program: Sequence[int], phases: Sequence[int]) -> list[cpu.Computer]:
    if not phases:
        raise ValueError('No phase settings given')

    amps = []

    for phase in phases:
        amp = cpu.Computer(program)
        amp.push_input(phase)
        amps.append(amp)

    return amps


def next_output(amp: cpu.Computer) -> int | None:
    ''' Runs until the amplifier emits a value, None once it halts '''

    result = amp.run()

    if isinstance(result, cpu.Output):
        return result.value

    if isinstance(result, cpu.NeedInput):
        raise cpu.InputExhausted(f'Amplifier starved at IP:{amp.ip}')

    return None


def run_chain(program: Sequence[int], phases: Sequence[int]) -> int:
    signal = 0

    for amp in make_amplifiers(program, phases):
        amp.push_input(signal)
        value = next_output(amp)

        if value is None:
            raise cpu.IntcodeError('Amplifier halted without producing a signal')

        signal = value

    return signal


def run_feedback(program: Sequence[int], phases: Sequence[int]) -> int:
    amps = make_amplifiers(program, phases)
    signal = 0
    thrust = None
    rounds = 0

    while True:
        for amp in amps:
            amp.push_input(signal)
            value = next_output(amp)

            # First halt ends the loop, the last thruster signal stands
            if value is None:
                lg.debug(f'Feedback loop settled after {rounds} rounds')

                if thrust is None:
                    raise cpu.IntcodeError('Feedback loop halted before reaching the thrusters')

                return thrust

            signal = value

        thrust = signal
        rounds += 1


def best_phases(
    program: Sequence[int],
    phases: Sequence[int],
    feedback: bool = False
) -> Tuple[int, Tuple[int, ...]]:
    runner = run_feedback if feedback else run_chain

    # Permutations of nothing is a single empty setting
    if not phases:
        raise ValueError('No phase settings given')

    def attempt(setting: Tuple[int, ...]) -> Tuple[int, Tuple[int, ...]]:
        signal = runner(program, setting)
        lg.debug(f'Phases {setting} -> {signal}')
        return (signal, setting)

    return max((attempt(s) for s in permutations(phases)), key=lambda r: r[0])
