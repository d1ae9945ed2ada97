from pathlib import Path
import tomllib


ADDRESS_LIMIT = 2 ** 32     # First address the machine refuses to touch
MAX_STEPS = None            # No bound on executed instructions


class MachineSettings:
    address_limit: int
    max_steps: int | None

    def __init__(self):
        self.address_limit = ADDRESS_LIMIT
        self.max_steps = MAX_STEPS

    def update(
        self,
        address_limit: int | None = None,
        max_steps: int | None = None
    ):
        if address_limit is not None:
            self.address_limit = address_limit

        if max_steps is not None:
            self.max_steps = max_steps

        return self

    @staticmethod
    def from_toml(path: Path) -> 'MachineSettings':
        config = tomllib.loads(path.read_text())
        machine = config.get('machine', {})

        return MachineSettings().update(
            address_limit=machine.get('address_limit'),
            max_steps=machine.get('max_steps')
        )
