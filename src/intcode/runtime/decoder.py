''' Instruction word decoding '''


def opcode(word: int) -> int:
    return word % 100


def mode(word: int, position: int) -> int:
    # Mode digits start at the hundreds place, absent digits are zero
    return word // 10 ** (2 + position) % 10
