import intcode.common.vmconf as vmconf
from intcode.common.vmconf import MachineSettings

from fixtures import with_settings_file  # noqa: F401


def test_defaults():
    settings = MachineSettings()
    assert settings.address_limit == vmconf.ADDRESS_LIMIT
    assert settings.max_steps is None


def test_update_keeps_unset():
    settings = MachineSettings().update(max_steps=5)
    assert settings.max_steps == 5
    assert settings.address_limit == vmconf.ADDRESS_LIMIT


def test_from_toml(with_settings_file):  # noqa: F811
    settings = MachineSettings.from_toml(with_settings_file)
    assert settings.address_limit == 64
    assert settings.max_steps == 1000


def test_from_toml_without_table(tmp_path):
    path = tmp_path / 'empty.toml'
    path.write_text('')
    settings = MachineSettings.from_toml(path)
    assert settings.address_limit == vmconf.ADDRESS_LIMIT
