"""
Tests for cfgload.context loader configuration.
"""

from cfgload import Failure, Success, decode, load, loader_context
from cfgload.context import current_encoding, is_strict


def test_defaults():
    assert current_encoding() == "utf-8"
    assert is_strict() is True


def test_context_restores_settings():
    with loader_context(encoding="latin-1", strict=False):
        assert current_encoding() == "latin-1"
        assert is_strict() is False
    assert current_encoding() == "utf-8"
    assert is_strict() is True


def test_lax_mode_coerces(Service):
    content = b'name: api\nport: "9000"\n'
    assert isinstance(decode(content, Service), Failure)
    with loader_context(strict=False):
        result = decode(content, Service)
    assert isinstance(result, Success)
    assert result.value.port == 9000


def test_lax_mode_still_rejects_unknown_fields(Guideline):
    with loader_context(strict=False):
        assert isinstance(decode(b'field: "x"\nextra: 1\n', Guideline), Failure)


def test_encoding(write_file, Guideline):
    path = write_file("latin.cfg", 'field: "caf\xe9"\n'.encode("latin-1"))
    assert isinstance(load(path, Guideline), Failure)
    with loader_context(encoding="latin-1"):
        result = load(path, Guideline)
    assert result == Success(Guideline(field="caf\xe9"))
