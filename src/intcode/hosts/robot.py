''' Hull painting robot driven by a machine '''

import logging as lg
from typing import Sequence, Tuple

import intcode.runtime.cpu as cpu


BLACK = 0
WHITE = 1

TURN_LEFT = 0
TURN_RIGHT = 1

# Headings clockwise from up, y grows downwards
HEADINGS = [(0, -1), (1, 0), (0, 1), (-1, 0)]

Point = Tuple[int, int]
Hull = dict[Point, int]


class Robot:
    position: Point
    heading: int    # Index into HEADINGS

    def __init__(self, program: Sequence[int]):
        self.proc = cpu.Computer(program)
        self.position = (0, 0)
        self.heading = 0

    def expect_output(self, what: str) -> int | None:
        result = self.proc.run()

        if isinstance(result, cpu.Output):
            return result.value

        if isinstance(result, cpu.NeedInput):
            raise cpu.IntcodeError(f'Robot asked for input while emitting {what}')

        return None

    def turn(self, direction: int):
        if direction == TURN_LEFT:
            self.heading = (self.heading - 1) % len(HEADINGS)
        elif direction == TURN_RIGHT:
            self.heading = (self.heading + 1) % len(HEADINGS)
        else:
            raise cpu.IntcodeError(f'Unknown turn {direction}')

    def move(self):
        dx, dy = HEADINGS[self.heading]
        x, y = self.position
        self.position = (x + dx, y + dy)

    def step(self, hull: Hull) -> bool:
        ''' Paints one panel and moves on, False once the program halts '''

        self.proc.push_input(hull.get(self.position, BLACK))

        colour = self.expect_output('colour')

        if colour is None:
            return False

        if colour not in (BLACK, WHITE):
            raise cpu.IntcodeError(f'Unknown colour {colour}')

        hull[self.position] = colour

        direction = self.expect_output('turn')

        if direction is None:
            raise cpu.IntcodeError('Robot halted between colour and turn')

        self.turn(direction)
        self.move()
        return True


def paint(program: Sequence[int], start_colour: int = BLACK) -> Hull:
    robot = Robot(program)
    hull: Hull = {}

    if start_colour != BLACK:
        hull[robot.position] = start_colour

    while robot.step(hull):
        pass

    lg.info(f'Robot painted {len(hull)} panels')
    return hull


def render(hull: Hull) -> str:
    if not hull:
        return ''

    xs = [x for x, _ in hull]
    ys = [y for _, y in hull]

    lines = []

    for y in range(min(ys), max(ys) + 1):
        line = ''.join(
            '#' if hull.get((x, y), BLACK) == WHITE else ' '
            for x in range(min(xs), max(xs) + 1)
        )
        lines.append(line.rstrip())

    return '\n'.join(lines)
