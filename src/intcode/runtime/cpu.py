import logging as lg
from collections import deque
from dataclasses import dataclass
from typing import Callable, Iterable

import intcode.common.ops as ops
from intcode.common.vmconf import MachineSettings
from intcode.runtime.memory import Memory
import intcode.runtime.decoder as decoder


class IntcodeError(Exception):
    pass


class ProgramSyntaxError(IntcodeError):
    pass


class InputExhausted(IntcodeError):
    pass


class StepLimitExceeded(IntcodeError):
    pass


class MachineFault(IntcodeError):
    ''' Malformed program detected at the instruction at `ip` '''

    ip: int
    word: int

    def __init__(self, message: str, ip: int, word: int):
        super().__init__(f'{message} at IP:{ip} (instruction {word})')
        self.ip = ip
        self.word = word


class UnknownOpcode(MachineFault):
    pass


class UnknownMode(MachineFault):
    pass


class ImmediateDestination(MachineFault):
    pass


class NegativeAddress(MachineFault):
    pass


class AddressOutOfRange(MachineFault):
    pass


# - Run results - #

@dataclass(frozen=True)
class Output:
    value: int


@dataclass(frozen=True)
class NeedInput:
    pass


@dataclass(frozen=True)
class Halted:
    pass


Result = Output | NeedInput | Halted

NEED_INPUT = NeedInput()
HALTED = Halted()


class Computer():
    ip: int                 # Instruction pointer
    rb: int                 # Relative base
    inputs: deque[int]      # Host -> machine FIFO
    output: int | None      # Last produced value
    halted: bool
    steps: int              # Executed instructions

    def __init__(self, program: Iterable[int], settings: MachineSettings | None = None):
        if settings is None:
            settings = MachineSettings()

        self.memory = Memory(program)
        self.settings = settings

        self.ip = 0
        self.rb = 0
        self.inputs = deque()
        self.output = None
        self.halted = False
        self.steps = 0

    # - Host interface - #

    def push_input(self, value: int):
        self.inputs.append(value)

    def push_inputs(self, values: Iterable[int]):
        self.inputs.extend(values)

    def peek_memory(self, addr: int) -> int:
        return self.memory.read(self.check_address(addr))

    def poke_memory(self, addr: int, value: int):
        self.memory.write(self.check_address(addr), value)

    def is_halted(self) -> bool:
        return self.halted

    def run(self) -> Result:
        if self.halted:
            return HALTED

        while True:
            result = self.exec_next()

            if result is not None:
                return result

    # - Helpers - #

    def debug_dump(self):
        lg.debug(
            f'IP:{self.ip} RB:{self.rb} IN:{len(self.inputs)} '
            f'STEPS:{self.steps} HALTED:{self.halted}'
        )

    def word(self) -> int:
        return self.memory.read(self.ip)

    def fault(self, exc_type: type[MachineFault], message: str) -> MachineFault:
        self.debug_dump()
        return exc_type(message, self.ip, self.word())

    def check_address(self, addr: int) -> int:
        if addr < 0:
            raise self.fault(NegativeAddress, f'Negative address {addr}')

        if addr >= self.settings.address_limit:
            raise self.fault(AddressOutOfRange, f'Address {addr} is out of range')

        return addr

    def load(self, addr: int) -> int:
        return self.memory.read(self.check_address(addr))

    def raw_param(self, position: int) -> int:
        return self.memory.read(self.ip + 1 + position)

    def param_mode(self, position: int) -> int:
        mode = decoder.mode(self.word(), position)

        if mode not in ops.MODES:
            raise self.fault(UnknownMode, f'Unknown mode {mode} for parameter {position}')

        return mode

    def get_param(self, position: int) -> int:
        mode = self.param_mode(position)
        raw = self.raw_param(position)

        if mode == ops.IMMEDIATE:
            return raw

        if mode == ops.RELATIVE:
            return self.load(self.rb + raw)

        return self.load(raw)

    def dest_param(self, position: int) -> int:
        mode = self.param_mode(position)
        raw = self.raw_param(position)

        if mode == ops.IMMEDIATE:
            raise self.fault(ImmediateDestination, f'Parameter {position} is an immediate destination')

        if mode == ops.RELATIVE:
            return self.check_address(self.rb + raw)

        return self.check_address(raw)

    def arithm_pair(self, op: Callable[[int, int], int]):
        a = self.get_param(0)
        b = self.get_param(1)
        dest = self.dest_param(2)
        self.memory.write(dest, op(a, b))
        self.ip += 4

    def jump_if(self, cond: Callable[[int], bool]):
        value = self.get_param(0)
        target = self.get_param(1)

        if cond(value):
            self.ip = self.check_address(target)
        else:
            self.ip += 3

    # - Operations - #

    def add(self):
        self.arithm_pair(lambda a, b: a + b)

    def mul(self):
        self.arithm_pair(lambda a, b: a * b)

    def inp(self) -> NeedInput | None:
        dest = self.dest_param(0)

        if not self.inputs:
            lg.debug(f'Input starved at IP:{self.ip}')
            return NEED_INPUT

        self.memory.write(dest, self.inputs.popleft())
        self.ip += 2
        return None

    def out(self) -> Output:
        value = self.get_param(0)
        self.output = value
        self.ip += 2
        return Output(value)

    def jit(self):
        self.jump_if(lambda v: v != 0)

    def jif(self):
        self.jump_if(lambda v: v == 0)

    def slt(self):
        self.arithm_pair(lambda a, b: 1 if a < b else 0)

    def seq(self):
        self.arithm_pair(lambda a, b: 1 if a == b else 0)

    def arb(self):
        self.rb += self.get_param(0)
        self.ip += 2

    def hlt(self) -> Halted:
        lg.debug(f'Halted at IP:{self.ip} after {self.steps} steps')
        self.halted = True
        return HALTED

    HANDLERS = {
        ops.ADD: add,
        ops.MUL: mul,
        ops.INP: inp,
        ops.OUT: out,
        ops.JIT: jit,
        ops.JIF: jif,
        ops.SLT: slt,
        ops.SEQ: seq,
        ops.ARB: arb,
        ops.HLT: hlt
    }

    # -- Implementation -- #

    def exec_next(self) -> Result | None:
        word = self.word()
        op = decoder.opcode(word)

        # Python's modulo would map negative words onto valid opcodes
        if word < 0:
            raise self.fault(UnknownOpcode, 'Negative instruction word')

        if op not in self.HANDLERS:
            raise self.fault(UnknownOpcode, f'Unknown opcode {op}')

        max_steps = self.settings.max_steps

        if max_steps is not None and self.steps >= max_steps:
            self.debug_dump()
            raise StepLimitExceeded(f'Step limit {max_steps} reached at IP:{self.ip}')

        handler = self.HANDLERS[op]
        result = handler(self)

        if result is not NEED_INPUT:
            self.steps += 1

        return result
