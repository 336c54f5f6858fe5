import json

from config import AppSettings, dict_to_settings, load_settings, save_settings, settings_to_dict


def test_missing_file_gives_defaults(tmp_path):
    assert load_settings(str(tmp_path / "nope.json")) == AppSettings()


def test_round_trip(tmp_path):
    path = tmp_path / "settings.json"
    settings = AppSettings(currency_symbol="$", export_dir="/tmp/reports", log_level="DEBUG")
    save_settings(settings, str(path))
    assert load_settings(str(path)) == settings


def test_unknown_keys_ignored():
    s = dict_to_settings({"currency_symbol": "€", "theme": "dark"})
    assert s.currency_symbol == "€"
    assert settings_to_dict(s)["export_dir"] == ""


def test_unreadable_file_gives_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json")
    assert load_settings(str(path)) == AppSettings()

    path.write_text(json.dumps(["a", "list"]))
    assert load_settings(str(path)) == AppSettings()
