import pytest

from greeting_endpoint.config.service_settings import ServiceSettings

BASE = """
logging:
  root_log_level: INFO
main:
  app_name: base
  seed_names: [Apple]
"""


@pytest.fixture
def settings_dir(tmp_path):
    (tmp_path / 'settings.yaml').write_text(BASE, encoding='utf-8')
    return tmp_path


def test_later_files_take_precedence(settings_dir):
    (settings_dir / 'override.yaml').write_text('main:\n  app_name: override\n', encoding='utf-8')

    settings = ServiceSettings(['settings.yaml', 'override.yaml'], str(settings_dir))

    assert settings.main.app_name == 'override'
    assert settings.main.seed_names == ['Apple']
    assert settings.main.greeting_prefix == 'Hello '


def test_missing_files_are_skipped(settings_dir, caplog):
    settings = ServiceSettings(['settings.yaml', 'missing.yaml'], str(settings_dir))

    assert settings.main.app_name == 'base'
    assert 'missing.yaml' in caplog.text


def test_no_existing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        ServiceSettings('settings.yaml', str(tmp_path))


def test_environment_overrides_yaml(settings_dir, monkeypatch):
    monkeypatch.setenv('MAIN__GREETING_PREFIX', 'Hi ')

    settings = ServiceSettings('settings.yaml', str(settings_dir))

    assert settings.main.greeting_prefix == 'Hi '
