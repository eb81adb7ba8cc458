from config_assistant.adapters.mapping_store import (
    MappingConnectionStringStore,
    MappingSettingsStore,
)


def test_settings_store_lookup():
    store = MappingSettingsStore({"Mode": "fast"})

    assert store.get("Mode") == "fast"
    assert store.get("mode") is None
    assert "Mode" in store
    assert len(store) == 1


def test_settings_store_is_a_snapshot():
    values = {"Mode": "fast"}
    store = MappingSettingsStore(values)
    values["Mode"] = "slow"
    values["Extra"] = "1"

    assert store.get("Mode") == "fast"
    assert store.get("Extra") is None


def test_empty_stores():
    assert MappingSettingsStore().get("anything") is None
    assert MappingConnectionStringStore(None).get("anything") is None


def test_connection_string_store_lookup():
    store = MappingConnectionStringStore({"Primary": "Host=db"})

    assert store.get("Primary") == "Host=db"
    assert store.get("Secondary") is None
    assert "Primary" in store
    assert len(store) == 1
