import pytest

from config.settings import BenchmarkConfig, CliConfig, Config
from utils.exceptions import ConfigurationError


ENV_VARS = (
    'LOG_LEVEL',
    'BASE122_STRIP_INPUT',
    'BENCHMARK_SIZES',
    'BENCHMARK_DENSITIES',
    'BENCHMARK_SAMPLE_SIZE',
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_cli_defaults():
    config = Config().load_cli_config()
    assert config == CliConfig(log_level="WARNING", strip_input=True)


def test_cli_from_environment(monkeypatch):
    monkeypatch.setenv('LOG_LEVEL', 'debug')
    monkeypatch.setenv('BASE122_STRIP_INPUT', 'no')
    manager = Config()
    config = manager.load_cli_config()
    assert config.log_level == 'debug'
    assert config.strip_input is False
    assert manager.cli is config


def test_cli_invalid_log_level(monkeypatch):
    monkeypatch.setenv('LOG_LEVEL', 'LOUD')
    with pytest.raises(ValueError):
        Config().load_cli_config()


def test_cli_invalid_boolean(monkeypatch):
    monkeypatch.setenv('BASE122_STRIP_INPUT', 'maybe')
    with pytest.raises(ConfigurationError):
        Config().load_cli_config()


def test_benchmark_defaults():
    config = Config().load_benchmark_config()
    assert config == BenchmarkConfig()
    assert config.sizes == (10, 100, 1000, 10000)
    assert config.densities == (0.0, 0.1, 0.2, 0.5)
    assert config.sample_size == 1000


def test_benchmark_from_environment(monkeypatch):
    monkeypatch.setenv('BENCHMARK_SIZES', '5, 50')
    monkeypatch.setenv('BENCHMARK_DENSITIES', '0.25,1')
    monkeypatch.setenv('BENCHMARK_SAMPLE_SIZE', '64')
    config = Config().load_benchmark_config()
    assert config.sizes == (5, 50)
    assert config.densities == (0.25, 1.0)
    assert config.sample_size == 64


@pytest.mark.parametrize("name, value", [
    ('BENCHMARK_SIZES', '10,ten'),
    ('BENCHMARK_DENSITIES', 'half'),
    ('BENCHMARK_SAMPLE_SIZE', 'many'),
])
def test_benchmark_unparseable(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigurationError):
        Config().load_benchmark_config()


@pytest.mark.parametrize("config", [
    BenchmarkConfig(sizes=()),
    BenchmarkConfig(sizes=(0,)),
    BenchmarkConfig(densities=(1.5,)),
    BenchmarkConfig(sample_size=0),
])
def test_benchmark_validation(config):
    with pytest.raises(ValueError):
        config.validate()
