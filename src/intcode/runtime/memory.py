# Sparse machine memory

from typing import Iterable


class Memory:
    cells: dict[int, int]

    def __init__(self, program: Iterable[int] = ()):
        self.cells = dict(enumerate(program))

    def read(self, addr: int) -> int:
        return self.cells.get(addr, 0)

    def write(self, addr: int, value: int):
        self.cells[addr] = value

    def dump(self, start: int, end: int) -> list[int]:
        return [self.read(addr) for addr in range(start, end)]

    def __len__(self):
        return len(self.cells)
