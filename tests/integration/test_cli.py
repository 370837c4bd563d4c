"""End-to-end tests for the fireworks-stand CLI and deploy shortcuts."""

from datetime import date

import pytest

from fireworks_stand.cli.main import deploy_dev, deploy_prod, deploy_staging, main

BUILD_VARS = ("BRANCH_NAME", "BUILD_NUMBER", "DOCKER_REGISTRY_USR", "NEXT_PUBLIC_API_URL")


@pytest.fixture
def clean_env(monkeypatch):
    for var in BUILD_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.delenv("FIREWORKS_LOG_LEVEL", raising=False)
    return monkeypatch


class TestDeployCommand:
    """Tests for ``fireworks-stand deploy``."""

    def test_development(self, clean_env, capsys):
        """Test a development run with no variables set."""
        code = main(["deploy", "development"])

        out = capsys.readouterr().out
        assert code == 0
        assert out.startswith("Deploying to development environment\n")
        assert "Deploying image: fireworks-app:develop-local\n" in out

    def test_alias_with_env(self, clean_env, capsys):
        """Test the prod alias with every build variable set."""
        clean_env.setenv("BRANCH_NAME", "main")
        clean_env.setenv("BUILD_NUMBER", "88")
        clean_env.setenv("DOCKER_REGISTRY_USR", "robert")
        clean_env.setenv("NEXT_PUBLIC_API_URL", "https://api.fireworks-sales.example.com")

        code = main(["deploy", "prod"])

        out = capsys.readouterr().out
        assert code == 0
        assert "Deploying image: robert/fireworks-app:main-88\n" in out
        assert "API URL: https://api.fireworks-sales.example.com\n" in out

    def test_unknown_environment(self, clean_env, capsys):
        """Test that an unknown name exits 1 with an error on stderr."""
        code = main(["deploy", "qa"])

        captured = capsys.readouterr()
        assert code == 1
        assert captured.out == ""
        assert "Unknown environment" in captured.err

    def test_verbose_keeps_stdout_clean(self, clean_env, capsys):
        """Test that -v logging does not leak into stdout."""
        main(["deploy", "staging", "-v"])
        first = capsys.readouterr().out

        main(["deploy", "staging"])
        second = capsys.readouterr().out

        assert first == second


class TestDeployShortcuts:
    """Tests for the deploy-dev / deploy-staging / deploy-prod entry points."""

    @pytest.mark.parametrize("entry,url", [
        (deploy_dev, "http://dev.fireworks-sales.example.com"),
        (deploy_staging, "http://staging.fireworks-sales.example.com"),
        (deploy_prod, "https://fireworks-sales.example.com"),
    ])
    def test_exit_zero_and_url(self, clean_env, capsys, entry, url):
        """Test that each shortcut exits 0 and ends with its URL."""
        code = entry()

        out = capsys.readouterr().out
        assert code == 0
        assert out.endswith(f"Application is now running at: {url}\n")

    def test_repeat_runs_identical(self, clean_env, capsys):
        """Test that repeated runs print identical output."""
        deploy_prod()
        first = capsys.readouterr().out
        deploy_prod()
        second = capsys.readouterr().out

        assert first == second


class TestStorefrontCommand:
    """Tests for ``fireworks-stand storefront``."""

    def test_stdout(self, clean_env, capsys):
        """Test rendering the page to stdout."""
        code = main(["storefront"])

        out = capsys.readouterr().out
        assert code == 0
        assert out.startswith("<!DOCTYPE html>")
        assert f"&copy; {date.today().year} " in out

    def test_out_file(self, clean_env, tmp_path, capsys):
        """Test writing the page to --out."""
        target = tmp_path / "site" / "index.html"

        code = main(["storefront", "--out", str(target)])

        assert code == 0
        assert "Aerial Finale" in target.read_text(encoding="utf-8")
        assert str(target) in capsys.readouterr().out


class TestMisc:
    """Tests for environments listing, log level and help."""

    def test_environments(self, clean_env, capsys):
        """Test the environments listing order."""
        code = main(["environments"])

        lines = capsys.readouterr().out.splitlines()
        assert code == 0
        assert [line.split()[0] for line in lines] == ["development", "staging", "production"]

    def test_log_level_does_not_change_output(self, clean_env, capsys):
        """Test that FIREWORKS_LOG_LEVEL leaves stdout untouched."""
        clean_env.setenv("FIREWORKS_LOG_LEVEL", "debug")
        main(["deploy", "dev"])
        with_debug = capsys.readouterr().out

        clean_env.delenv("FIREWORKS_LOG_LEVEL")
        main(["deploy", "dev"])
        without_debug = capsys.readouterr().out

        assert with_debug == without_debug

    def test_no_command(self, clean_env, capsys):
        """Test that no subcommand prints help and exits 1."""
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out
