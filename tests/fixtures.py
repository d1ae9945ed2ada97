# type: ignore
import pytest

from intcode.common.vmconf import MachineSettings


@pytest.fixture
def quine():
    yield [109, 1, 204, -1, 1001, 100, 1, 100, 1008, 100, 16, 101, 1006, 101, 0, 99]


@pytest.fixture
def with_settings_file(tmp_path):
    path = tmp_path / 'machine.toml'
    path.write_text('[machine]\naddress_limit = 64\nmax_steps = 1000\n')
    yield path


@pytest.fixture
def tight_settings():
    yield MachineSettings().update(address_limit=64, max_steps=100)
