import sys

import pytest

import run
from app.config.loader import ConfigLoader, load_config_for_environment
from app.config.settings import Environment, Settings


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for name in ("ENVIRONMENT", "PORT", "MAX_RADIUS", "DEFAULT_RADIUS", "MAX_RESULTS",
                 "DEFAULT_LIMIT", "SECURITY_RATE_LIMIT_REQUESTS", "SECURITY_CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


def test_environment_file_reaches_nested_groups(workdir):
    (workdir / ".env.production").write_text(
        "PORT=4000\n"
        "MAX_RADIUS=20.0\n"
        "DEFAULT_LIMIT=5\n"
        "SECURITY_RATE_LIMIT_REQUESTS=7\n"
        "SECURITY_CORS_ORIGINS=https://a.example,https://b.example\n"
    )

    s = ConfigLoader.load_environment_config("production")

    assert s.environment == Environment.PRODUCTION
    assert s.port == 4000
    assert s.discovery.max_radius == 20.0
    assert s.discovery.default_limit == 5
    assert s.discovery.default_radius == 5.0
    assert s.security.rate_limit_requests == 7
    assert s.security.cors_origins == ["https://a.example", "https://b.example"]


def test_default_dotenv_reaches_nested_groups(workdir):
    (workdir / ".env").write_text("MAX_RESULTS=25\nSECURITY_RATE_LIMIT_ENABLED=false\n")

    s = Settings()

    assert s.discovery.max_results == 25
    assert s.security.rate_limit_enabled is False


def test_missing_file_falls_back_to_defaults(workdir):
    s = load_config_for_environment("staging")
    assert s.environment == Environment.STAGING
    assert s.discovery.max_radius == 50.0


def test_sample_file_round_trips(workdir):
    path = ConfigLoader.create_sample_env_file("production", output_path=".env.production")
    assert path == ".env.production"

    s = ConfigLoader.load_environment_config("production")

    assert s.is_production()
    assert s.workers == 4
    assert s.log_json is True
    assert s.discovery.max_radius == 50.0
    assert s.discovery.default_limit == 10
    assert s.security.cors_origins == ["https://example.com"]
    assert s.security.rate_limit_requests == 100


def test_sample_file_default_name(workdir):
    path = ConfigLoader.create_sample_env_file("development")
    assert path == ".env.development.sample"
    assert "MAX_RADIUS=50.0" in (workdir / path).read_text()


def test_available_environments_skip_samples(workdir):
    (workdir / ".env.staging").write_text("")
    (workdir / ".env.production").write_text("")
    (workdir / ".env.production.sample").write_text("")
    (workdir / ".env").write_text("")

    assert ConfigLoader.get_available_environments() == ["production", "staging"]


def test_invalid_discovery_value_fails_validation(workdir):
    (workdir / ".env.staging").write_text("MAX_RADIUS=abc\n")
    assert ConfigLoader.validate_environment_config("staging") is False


def test_default_radius_over_max_fails_validation(workdir):
    (workdir / ".env.staging").write_text("DEFAULT_RADIUS=30\nMAX_RADIUS=20\n")
    assert ConfigLoader.validate_environment_config("staging") is False


def test_valid_file_passes_validation(workdir):
    (workdir / ".env.testing").write_text("PORT=3100\nMAX_RADIUS=25\n")
    assert ConfigLoader.validate_environment_config("testing") is True


class TestRunCommands:
    def test_list_envs(self, workdir, monkeypatch, capsys):
        (workdir / ".env.staging").write_text("")
        monkeypatch.setattr(sys, "argv", ["run.py", "--list-envs"])
        run.main()
        assert "  - staging" in capsys.readouterr().out

    def test_validate_env_invalid_exits(self, workdir, monkeypatch):
        (workdir / ".env.production").write_text("MAX_RESULTS=0\n")
        monkeypatch.setattr(sys, "argv", ["run.py", "--validate-env", "production"])
        with pytest.raises(SystemExit) as exc_info:
            run.main()
        assert exc_info.value.code == 1

    def test_validate_env_valid(self, workdir, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["run.py", "--validate-env", "development"])
        run.main()
        assert "is valid" in capsys.readouterr().out

    def test_create_sample(self, workdir, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["run.py", "--create-sample", "staging"])
        run.main()
        assert (workdir / ".env.staging.sample").exists()
