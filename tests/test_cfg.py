import asyncio
import logging

import pytest

from optbox import cfg
from optbox.err import ArgTypeError


def test_defaults():
    assert cfg.DEFAULTS[cfg.VERBOSITY] == 0


def test_env_names():
    assert cfg.VERBOSITY.env_name == "OPTBOX_VERBOSITY"


def test_configure_is_scoped_to_with_block():
    before = cfg.get(cfg.VERBOSITY)
    with cfg.configure(verbosity=before + 2) as container:
        assert cfg.get(cfg.VERBOSITY) == before + 2
        assert cfg.current() is container
        assert container.parent is cfg.GLOBAL
    assert cfg.get(cfg.VERBOSITY) == before
    assert cfg.current() is cfg.GLOBAL


def test_configure_nests():
    with cfg.configure(verbosity=1):
        with cfg.configure(verbosity=2):
            assert cfg.get(cfg.VERBOSITY) == 2
        assert cfg.get(cfg.VERBOSITY) == 1


def test_configure_restores_on_error():
    with pytest.raises(RuntimeError):
        with cfg.configure(verbosity=3):
            raise RuntimeError("boom")
    assert cfg.current() is cfg.GLOBAL


def test_configure_unknown_setting_raises_key_error():
    with pytest.raises(KeyError):
        cfg.configure(not_a_setting=1)


def test_configure_wrong_type_raises_arg_type_error():
    with pytest.raises(ArgTypeError) as info:
        cfg.configure(verbosity="loud")
    assert info.value.name == "verbosity"


@pytest.mark.parametrize("value", [True, False])
def test_configure_refuses_bool_for_int_setting(value):
    with pytest.raises(ArgTypeError):
        cfg.configure(verbosity=value)
    assert cfg.get(cfg.VERBOSITY) is not value


def test_configure_is_isolated_between_tasks():
    async def reader(seen: list):
        await asyncio.sleep(0)
        seen.append(cfg.get(cfg.VERBOSITY))

    async def writer():
        with cfg.configure(verbosity=7):
            await asyncio.sleep(0)
            return cfg.get(cfg.VERBOSITY)

    async def main():
        seen = []
        results = await asyncio.gather(writer(), reader(seen))
        return results[0], seen[0]

    assert asyncio.run(main()) == (7, cfg.GLOBAL[cfg.VERBOSITY])


def test_container_items_are_effective_values():
    container = cfg.GLOBAL.derive(verbosity=5)
    assert dict(container.items()) == {"verbosity": 5}
    assert cfg.VERBOSITY in container
    assert "verbosity" not in container


def test_load_env_reads_set_vars():
    assert cfg.load_env({"OPTBOX_VERBOSITY": "2", "OTHER": "x"}) == {
        "verbosity": 2
    }


def test_load_env_logs_and_skips_bad_values(caplog):
    with caplog.at_level(logging.ERROR, logger="optbox.cfg"):
        values = cfg.load_env({"OPTBOX_VERBOSITY": "loud"})

    assert values == {}
    assert any(
        "verbosity" in record.getMessage() for record in caplog.records
    )
