import pytest

from hexterm.core import config as c
from hexterm.core.errors import CapabilityLookupError, ParseError
from hexterm.logic.code.renderer import compose_code, print_code
from hexterm.logic.probe.renderer import compose_palette, print_palette


class TestPalette:
    def test_eight_colors(self, fake_terminal_factory):
        out = compose_palette(fake_terminal_factory(colors=8))
        expected = "".join(f"<fg:{i}>{i:>4}" for i in range(8)) + "<sgr0>"
        assert out == expected

    def test_full_palette(self, term):
        out = compose_palette(term)
        assert out.startswith("<fg:0>   0<fg:1>   1")
        assert out.endswith("<fg:255> 255<sgr0>")
        assert out.count("<fg:") == 256

    def test_direct_color_capped(self, fake_terminal_factory):
        out = compose_palette(fake_terminal_factory(colors=16777216))
        assert out.count("<fg:") == c.PALETTE_SIZE

    def test_no_colors(self, fake_terminal_factory):
        assert compose_palette(fake_terminal_factory(colors=0)) == "<sgr0>"

    def test_print_ends_with_newline(self, fake_terminal_factory, capsys):
        print_palette(fake_terminal_factory(colors=2))
        assert capsys.readouterr().out == "<fg:0>   0<fg:1>   1<sgr0>\n"

    def test_missing_color_count(self, fake_terminal_factory):
        with pytest.raises(CapabilityLookupError):
            compose_palette(fake_terminal_factory(missing={"colors"}))


class TestCode:
    def test_swatch(self, term):
        assert compose_code("ff8000", term) == "<fg:214> 214<sgr0> <bg:214> 214<sgr0>"

    def test_primary(self, term):
        assert compose_code("f00", term) == "<fg:9>   9<sgr0> <bg:9>   9<sgr0>"

    def test_verbose(self, term):
        out = compose_code("70f", term, verbose=True)
        assert "#7000F0" in out
        assert "rgb(112, 0, 240)" in out
        assert "(rgb216)" in out
        assert out.endswith("<fg:93>  93<sgr0> <bg:93>  93<sgr0>")

    def test_verbose_grey(self, term):
        assert "(grey)" in compose_code("010101", term, verbose=True)

    def test_invalid(self, term):
        with pytest.raises(ParseError):
            compose_code("12", term)

    def test_print(self, term, capsys):
        print_code("000", term)
        assert capsys.readouterr().out == "<fg:0>   0<sgr0> <bg:0>   0<sgr0>\n"
