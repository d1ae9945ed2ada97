import intcode.common.ops as ops
import intcode.runtime.decoder as decoder


def test_plain_opcode():
    assert decoder.opcode(2) == ops.MUL
    assert [decoder.mode(2, i) for i in range(3)] == [ops.POSITION] * 3


def test_mixed_modes():
    assert decoder.opcode(1002) == ops.MUL
    assert [decoder.mode(1002, i) for i in range(3)] == [ops.POSITION, ops.IMMEDIATE, ops.POSITION]


def test_relative_modes():
    assert decoder.opcode(21201) == ops.ADD
    assert [decoder.mode(21201, i) for i in range(3)] == [ops.RELATIVE, ops.IMMEDIATE, ops.RELATIVE]


def test_halt():
    assert decoder.opcode(99) == ops.HLT
    assert decoder.opcode(1199) == ops.HLT


def test_single_mode():
    assert decoder.mode(204, 0) == ops.RELATIVE
    assert decoder.mode(204, 1) == ops.POSITION
    assert decoder.mode(109, 0) == ops.IMMEDIATE
