import pytest

from hexterm.core.errors import CapabilityLookupError


class FakeTerminal:
    """Capability resolver that emits readable tokens instead of escapes."""

    def __init__(self, colors=256, missing=()):
        self._colors = colors
        self.missing = set(missing)

    def _check(self, capability):
        if capability in self.missing:
            raise CapabilityLookupError(capability, f"terminal does not support '{capability}'")

    def colors(self):
        self._check("colors")
        return self._colors

    def foreground(self, index):
        self._check("setaf")
        return f"<fg:{index}>"

    def background(self, index):
        self._check("setab")
        return f"<bg:{index}>"

    def attribute(self, name):
        self._check(name)
        return f"<{name}>"

    def reset(self):
        self._check("sgr0")
        return "<sgr0>"


@pytest.fixture
def term():
    return FakeTerminal()


@pytest.fixture
def fake_terminal_factory():
    return FakeTerminal
