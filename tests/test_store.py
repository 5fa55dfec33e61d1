import json
import logging

from core.store import JsonFileStore, MemoryStore


def test_memory_store_get_set_remove():
    store = MemoryStore()
    assert store.get('a') is None
    store.set('a', '1')
    store.set('b', 2)
    assert store.get('a') == '1'
    assert 'b' in store
    store.remove('a')
    store.remove('missing')
    assert store.as_dict() == {'b': 2}


def test_json_store_survives_reload(tmp_path):
    path = tmp_path / 'session.json'
    store = JsonFileStore(path)
    store.set('userName', 'ada')
    store.set('gameTimer', 42)

    reloaded = JsonFileStore(path)
    assert reloaded.get('userName') == 'ada'
    assert reloaded.get('gameTimer') == 42


def test_json_store_writes_on_every_change(tmp_path):
    path = tmp_path / 'session.json'
    store = JsonFileStore(path)
    store.set('score', 10)
    assert json.loads(path.read_text(encoding='utf-8')) == {'score': 10}
    store.remove('score')
    assert json.loads(path.read_text(encoding='utf-8')) == {}


def test_json_store_remove_missing_key_does_not_write(tmp_path):
    path = tmp_path / 'session.json'
    store = JsonFileStore(path)
    store.remove('score')
    assert not path.exists()


def test_json_store_ignores_corrupt_file(tmp_path, caplog):
    path = tmp_path / 'session.json'
    path.write_text('{not json', encoding='utf-8')
    with caplog.at_level(logging.WARNING):
        store = JsonFileStore(path)
    assert store.get('score') is None
    assert 'unreadable' in caplog.text

    store.set('score', 1)
    assert JsonFileStore(path).get('score') == 1


def test_json_store_ignores_non_object(tmp_path):
    path = tmp_path / 'session.json'
    path.write_text('[1, 2, 3]', encoding='utf-8')
    assert JsonFileStore(path).as_dict() == {}
