import argparse

import pytest

from hexterm.core.errors import CapabilityLookupError, ParseError
from hexterm.logic.style.renderer import compose_styled, render
from hexterm.logic.style.request import StyleRequest


def test_foreground_bold_order(term):
    request = StyleRequest(foreground="f00000", attributes=frozenset({"bold"}))
    assert compose_styled(request, "hi", term) == "<fg:9><bold>hi<sgr0>"


def test_background_after_foreground(term):
    request = StyleRequest(foreground="ff8000", background="000")
    assert compose_styled(request, "x", term) == "<fg:214><bg:0>x<sgr0>"


def test_attribute_order_is_fixed(term):
    request = StyleRequest(
        attributes=frozenset({"standout", "blink", "bold", "invisible", "reverse", "underline"})
    )
    assert compose_styled(request, "t", term) == (
        "<bold><underline><reverse><blink><invisible><standout>t<sgr0>"
    )


def test_no_style_still_resets(term):
    assert compose_styled(StyleRequest(), "plain", term) == "plain<sgr0>"


def test_suppress_reset(term):
    request = StyleRequest(foreground="fff", suppress_reset=True)
    assert compose_styled(request, "keep", term) == "<fg:15>keep"


def test_text_passed_through_unmodified(term):
    text = "a\tb %s {0} \\n"
    assert compose_styled(StyleRequest(suppress_reset=True), text, term) == text


def test_malformed_color_raises(term):
    with pytest.raises(ParseError):
        compose_styled(StyleRequest(foreground="zz0000"), "hi", term)


def test_capability_failure_propagates(fake_terminal_factory):
    term = fake_terminal_factory(missing={"setaf"})
    with pytest.raises(CapabilityLookupError):
        compose_styled(StyleRequest(foreground="fff"), "hi", term)


def test_render_prints_line(term, capsys):
    render(StyleRequest(background="5050ff", attributes=frozenset({"underline"})), "hi", term)
    assert capsys.readouterr().out == "<bg:12><underline>hi<sgr0>\n"


class TestFromArgs:
    def _args(self, **kw):
        base = dict(foreground=None, background=None, attributes=None, no_reset=False)
        base.update(kw)
        return argparse.Namespace(**base)

    def test_defaults(self):
        assert StyleRequest.from_args(self._args()) == StyleRequest()

    def test_unknown_attributes_dropped(self):
        request = StyleRequest.from_args(self._args(attributes=["bold", None, "bold"]))
        assert request.attributes == frozenset({"bold"})

    def test_fields(self):
        request = StyleRequest.from_args(
            self._args(foreground="f00000", background="000000", no_reset=True)
        )
        assert request.foreground == "f00000"
        assert request.background == "000000"
        assert request.suppress_reset is True
