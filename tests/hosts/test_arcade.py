import pytest

import intcode.runtime.cpu as cpu
import intcode.hosts.arcade as arcade


def draw(x: int, y: int, value: int) -> list[int]:
    return [104, x, 104, y, 104, value]


SCREEN = draw(0, 0, arcade.WALL) \
    + draw(1, 0, arcade.BLOCK) \
    + draw(2, 0, arcade.BLOCK) \
    + draw(1, 0, arcade.EMPTY) \
    + draw(-1, 0, 7) \
    + [99]

# Free play turns the leading add into a multiply, both skip four words
GAME = [1, 0, 0, 0] \
    + draw(5, 10, arcade.PADDLE) \
    + draw(3, 5, arcade.BALL) \
    + [3, 100] \
    + [1001, 100, 10, 101] \
    + [104, -1, 104, 0, 4, 101] \
    + [99]


def test_count_blocks():
    assert arcade.count_blocks(SCREEN) == 1


def test_events():
    cabinet = arcade.Arcade(SCREEN)
    assert cabinet.step() == arcade.TileEvent((0, 0), arcade.WALL)
    assert cabinet.step() == arcade.TileEvent((1, 0), arcade.BLOCK)
    assert cabinet.step() == arcade.TileEvent((2, 0), arcade.BLOCK)
    assert cabinet.step() == arcade.TileEvent((1, 0), arcade.EMPTY)
    assert cabinet.step() == arcade.ScoreEvent(7)
    assert cabinet.step() == cpu.HALTED
    assert cabinet.score == 7


def test_free_play_patch():
    cabinet = arcade.Arcade(GAME, free_play=True)
    assert cabinet.proc.peek_memory(0) == arcade.FREE_PLAY


def test_play():
    # Ball left of the paddle: joystick -1, score = -1 + 10
    assert arcade.play(GAME) == 9


def test_joystick():
    cabinet = arcade.Arcade(GAME, free_play=True)
    assert cabinet.joystick() == arcade.JOYSTICK_NEUTRAL
    cabinet.step()
    cabinet.step()
    assert cabinet.step() == cpu.NEED_INPUT
    assert cabinet.joystick() == arcade.JOYSTICK_LEFT


def test_count_blocks_needs_quarters():
    with pytest.raises(cpu.InputExhausted):
        arcade.count_blocks(GAME)


def test_interrupted_triple():
    with pytest.raises(cpu.IntcodeError):
        arcade.Arcade([104, 1, 99]).step()


def test_unknown_tile():
    with pytest.raises(cpu.IntcodeError):
        arcade.Arcade(draw(0, 0, 9) + [99]).step()
