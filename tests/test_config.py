import importlib
import config


def test_db_config_from_environment(monkeypatch):
    monkeypatch.setenv('INVENTORY_DB_HOST', 'db.internal')
    monkeypatch.setenv('INVENTORY_DB_PORT', '3307')
    monkeypatch.setenv('INVENTORY_DB_NAME', 'inventory')
    try:
        reloaded = importlib.reload(config)
        assert reloaded.db_config['host'] == 'db.internal'
        assert reloaded.db_config['port'] == 3307
        assert reloaded.db_config['database'] == 'inventory'
    finally:
        monkeypatch.undo()
        importlib.reload(config)


def test_default_accounts_cover_both_roles():
    roles = {role for _, role in config.DEFAULT_ACCOUNTS.values()}
    assert roles == {'admin', 'standard_user'}
