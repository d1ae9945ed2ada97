''' Arcade cabinet: draws tiles and reads a joystick through a machine '''

import logging as lg
from dataclasses import dataclass
from typing import Sequence, Tuple

import intcode.runtime.cpu as cpu


EMPTY = 0
WALL = 1
BLOCK = 2
PADDLE = 3
BALL = 4

TILES = (EMPTY, WALL, BLOCK, PADDLE, BALL)

SCORE_POINT = (-1, 0)
FREE_PLAY_ADDR = 0
FREE_PLAY = 2

JOYSTICK_LEFT = -1
JOYSTICK_NEUTRAL = 0
JOYSTICK_RIGHT = 1

Point = Tuple[int, int]


@dataclass(frozen=True)
class TileEvent:
    point: Point
    tile: int


@dataclass(frozen=True)
class ScoreEvent:
    score: int


Event = TileEvent | ScoreEvent | cpu.NeedInput | cpu.Halted


class Arcade:
    screen: dict[Point, int]
    score: int

    def __init__(self, program: Sequence[int], free_play: bool = False):
        self.proc = cpu.Computer(program)
        self.screen = {}
        self.score = 0

        if free_play:
            self.proc.poke_memory(FREE_PLAY_ADDR, FREE_PLAY)

    def read_value(self) -> int:
        result = self.proc.run()

        if not isinstance(result, cpu.Output):
            raise cpu.IntcodeError(f'Draw instruction interrupted by {type(result).__name__}')

        return result.value

    def step(self) -> Event:
        result = self.proc.run()

        if not isinstance(result, cpu.Output):
            return result

        x = result.value
        y = self.read_value()
        value = self.read_value()

        if (x, y) == SCORE_POINT:
            self.score = value
            return ScoreEvent(value)

        if value not in TILES:
            raise cpu.IntcodeError(f'Unknown tile {value} at {(x, y)}')

        self.screen[(x, y)] = value
        return TileEvent((x, y), value)

    def find(self, tile: int) -> Point | None:
        for point, t in self.screen.items():
            if t == tile:
                return point

        return None

    def joystick(self) -> int:
        ball = self.find(BALL)
        paddle = self.find(PADDLE)

        if ball is None or paddle is None:
            return JOYSTICK_NEUTRAL

        if ball[0] < paddle[0]:
            return JOYSTICK_LEFT

        if ball[0] > paddle[0]:
            return JOYSTICK_RIGHT

        return JOYSTICK_NEUTRAL

    def play(self) -> int:
        while True:
            event = self.step()

            if isinstance(event, cpu.Halted):
                lg.info(f'Game over, score {self.score}')
                return self.score

            if isinstance(event, cpu.NeedInput):
                self.proc.push_input(self.joystick())


def count_blocks(program: Sequence[int]) -> int:
    arcade = Arcade(program)

    while True:
        event = arcade.step()

        if isinstance(event, cpu.Halted):
            break

        if isinstance(event, cpu.NeedInput):
            raise cpu.InputExhausted('Arcade asked for the joystick without free play')

    return sum(1 for tile in arcade.screen.values() if tile == BLOCK)


def play(program: Sequence[int]) -> int:
    return Arcade(program, free_play=True).play()
