from intcode.runtime.memory import Memory


def test_program_image():
    memory = Memory([5, -6, 7])
    assert memory.dump(0, 3) == [5, -6, 7]
    assert len(memory) == 3


def test_unset_reads_zero():
    memory = Memory([1, 2])
    assert memory.read(2) == 0
    assert memory.read(10 ** 12) == 0
    assert len(memory) == 2


def test_write_grows():
    memory = Memory()
    memory.write(1000, 42)
    memory.write(1000, 43)
    assert memory.read(1000) == 43
    assert len(memory) == 1


def test_program_is_copied():
    program = [1, 2, 3]
    memory = Memory(program)
    memory.write(0, 99)
    assert program == [1, 2, 3]
