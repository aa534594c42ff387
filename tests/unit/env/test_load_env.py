"""
Tests for loading Env from the process environment and .env files.
"""

import pydantic
import pytest

from async_stream.env import Env, configure, load_env
from async_stream.logging import LogLevel
from async_stream.logging.config import StreamType


ENV_NAMES = [
    "ASYNC_STREAM_LOG_LEVEL",
    "ASYNC_STREAM_LOG_OUTPUT",
    "ASYNC_STREAM_LOGS_DIRECTORY",
    "ASYNC_STREAM_STRICT_CONVERSION",
]


@pytest.fixture
def clean_environ(monkeypatch):
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)

    return monkeypatch


class TestLoadEnv:
    def test_defaults(self, clean_environ, tmp_path):
        env = load_env(Env, env_file=str(tmp_path / "missing.env"))

        assert env.ASYNC_STREAM_LOG_LEVEL == "info"
        assert env.ASYNC_STREAM_LOG_OUTPUT == "stderr"
        assert env.ASYNC_STREAM_LOGS_DIRECTORY is None
        assert env.ASYNC_STREAM_STRICT_CONVERSION is False

    def test_process_environment(self, clean_environ, tmp_path):
        clean_environ.setenv("ASYNC_STREAM_LOG_LEVEL", "DEBUG")
        clean_environ.setenv("ASYNC_STREAM_STRICT_CONVERSION", "true")

        env = load_env(Env, env_file=str(tmp_path / "missing.env"))

        assert env.ASYNC_STREAM_LOG_LEVEL == "debug"
        assert env.ASYNC_STREAM_STRICT_CONVERSION is True

    def test_env_file_overrides_environment(self, clean_environ, tmp_path):
        clean_environ.setenv("ASYNC_STREAM_LOG_LEVEL", "debug")

        env_file = tmp_path / ".env"
        env_file.write_text(
            "ASYNC_STREAM_LOG_LEVEL=error\n"
            "ASYNC_STREAM_LOG_OUTPUT=stdout\n"
            f"ASYNC_STREAM_LOGS_DIRECTORY={tmp_path}\n"
        )

        env = load_env(Env, env_file=str(env_file))

        assert env.ASYNC_STREAM_LOG_LEVEL == "error"
        assert env.ASYNC_STREAM_LOG_OUTPUT == "stdout"
        assert env.ASYNC_STREAM_LOGS_DIRECTORY == str(tmp_path)

    def test_override_wins(self, clean_environ, tmp_path):
        clean_environ.setenv("ASYNC_STREAM_LOG_LEVEL", "debug")

        env = load_env(
            Env,
            env_file=str(tmp_path / "missing.env"),
            override=Env(ASYNC_STREAM_LOG_LEVEL="trace"),
        )

        assert env.ASYNC_STREAM_LOG_LEVEL == "trace"

    def test_invalid_level(self, clean_environ, tmp_path):
        clean_environ.setenv("ASYNC_STREAM_LOG_LEVEL", "loud")

        with pytest.raises(pydantic.ValidationError):
            load_env(Env, env_file=str(tmp_path / "missing.env"))


class TestConfigure:
    def test_applies_env_to_configs(self, logging_config, stream_config):
        env = configure(
            Env(
                ASYNC_STREAM_LOG_LEVEL="error",
                ASYNC_STREAM_LOG_OUTPUT="stdout",
                ASYNC_STREAM_STRICT_CONVERSION=True,
            )
        )

        assert env.ASYNC_STREAM_LOG_LEVEL == "error"
        assert logging_config.level == LogLevel.ERROR
        assert logging_config.output == StreamType.STDOUT
        assert stream_config.strict_conversion is True

    def test_loads_env_when_none_given(
        self,
        clean_environ,
        logging_config,
        stream_config,
        tmp_path,
    ):
        clean_environ.chdir(tmp_path)
        clean_environ.setenv("ASYNC_STREAM_LOG_LEVEL", "warn")

        env = configure()

        assert env.ASYNC_STREAM_LOG_LEVEL == "warn"
        assert logging_config.level == LogLevel.WARN
        assert stream_config.strict_conversion is False
