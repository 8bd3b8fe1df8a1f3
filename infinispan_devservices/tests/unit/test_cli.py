"""Unit tests for the configuration CLI."""

import json

import pytest

from infinispan_devservices import cli

pytestmark = pytest.mark.usefixtures("restore_logging")


def test_cli_prints_properties_config(clean_env, tmp_path, sample_properties_text, capsys):
    """Test that the CLI prints the resolved config and labels as JSON."""
    path = tmp_path / "application.properties"
    path.write_text(sample_properties_text, encoding="utf-8")

    exit_code = cli.main(["--properties", str(path), "--plain-logs"])

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["config"]["service_name"] == "grid-a"
    assert payload["config"]["port"] == 31000
    assert payload["config"]["artifacts"] == ["org.postgresql:postgresql:42.3.1", "https://repo.example.com/lib.jar"]
    assert payload["config"]["caches"] == {"cache1": "DIST_SYNC", "cache2": "REPL_SYNC"}
    assert payload["labels"] == {}


def test_cli_defaults_to_environment(clean_env, capsys):
    """Test that the CLI reads the environment when no file is given."""
    clean_env.setenv("INFINISPAN_CLIENT_DEVSERVICES_SERVICE_NAME", "grid-env")

    exit_code = cli.main([])

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["config"]["enabled"] is True
    assert payload["labels"] == {"quarkus-dev-service-infinispan": "grid-env"}


def test_cli_reports_configuration_errors(clean_env, tmp_path, capsys):
    """Test that configuration errors exit with status 2 and nothing on stdout."""
    exit_code = cli.main(["--properties", str(tmp_path / "missing.properties")])

    captured = capsys.readouterr()
    assert exit_code == 2
    assert captured.out == ""
    assert "missing_properties_file" in captured.err


def test_cli_prefix_selects_properties_keys(clean_env, tmp_path, capsys):
    """Test that a custom prefix is applied to the properties file."""
    path = tmp_path / "application.properties"
    path.write_text("app.grid.devservices.port=11222\n", encoding="utf-8")

    exit_code = cli.main(["--properties", str(path), "--prefix", "app.grid.devservices"])

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out)["config"]["port"] == 11222


def test_cli_rejects_prefix_without_properties(clean_env, capsys):
    """Test that --prefix is refused when the config comes from the environment."""
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--prefix", "app.grid.devservices"])

    assert excinfo.value.code == 2
    assert "--prefix requires --properties" in capsys.readouterr().err
