"""Tests for the make-ca command line interface (make_ca.cli)."""

from __future__ import annotations

from pathlib import Path

import pytest

from make_ca import __version__
from make_ca.cli import build_parser, main
from make_ca.scaffolder.project import is_project_initialized


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestBuildParser:
    def test_generate_flags(self):
        args = build_parser().parse_args(["generate", "user", "--only-domain", "--skip-application"])
        assert args.command == "generate"
        assert args.entity == "user"
        assert args.only_domain is True
        assert args.skip_application is True
        assert args.skip_domain is False

    def test_generate_alias(self):
        args = build_parser().parse_args(["g", "order"])
        assert args.command == "g"
        assert args.entity == "order"

    def test_init_path(self):
        args = build_parser().parse_args(["init", "--path", "./api"])
        assert args.path == Path("./api")

    def test_init_default_path(self):
        assert build_parser().parse_args(["init"]).path is None


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestMainDispatch:
    def test_no_arguments_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage: make-ca" in capsys.readouterr().out

    def test_unknown_command(self, capsys):
        assert main(["frobnicate"]) == 1
        captured = capsys.readouterr()
        assert "Invalid command: frobnicate" in captured.err
        assert "--help" in captured.out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_generate_without_entity(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["generate"])
        assert exc_info.value.code == 2


# ---------------------------------------------------------------------------
# init
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.usefixtures("clean_env")
class TestInitCommand:
    def test_init_with_path(self, tmp_path, capsys):
        target = tmp_path / "api"
        assert main(["init", "--path", str(target)]) == 0

        assert is_project_initialized(target)
        out = capsys.readouterr().out
        assert "Project initialized successfully!" in out
        assert "make-ca generate <entity>" in out

    def test_init_default_directory(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert main(["init"]) == 0
        assert is_project_initialized(tmp_path / "my-clean-project")

    def test_default_directory_from_env(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("MAKE_CA_DEFAULT_PROJECT_DIR", "service-api")
        assert main(["init"]) == 0
        assert is_project_initialized(tmp_path / "service-api")

    def test_source_dir_from_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("MAKE_CA_SOURCE_DIR", "lib")
        assert main(["init", "-p", str(tmp_path / "api")]) == 0
        assert (tmp_path / "api" / "lib" / "core" / "domain").is_dir()

    def test_non_empty_directory_warns(self, tmp_path, capsys):
        target = tmp_path / "api"
        target.mkdir()
        (target / "package.json").write_text("{}\n", encoding="utf-8")

        assert main(["init", "-p", str(target)]) == 0
        assert "Some files might be overwritten." in capsys.readouterr().out

    def test_init_twice(self, tmp_path, capsys):
        target = tmp_path / "api"
        assert main(["init", "-p", str(target)]) == 0
        capsys.readouterr()

        assert main(["init", "-p", str(target)]) == 0
        out = capsys.readouterr().out
        assert "Project is already initialized!" in out
        assert "Project initialized successfully!" not in out

    def test_init_path_is_a_file(self, tmp_path, capsys):
        target = tmp_path / "taken"
        target.write_text("x", encoding="utf-8")

        assert main(["init", "-p", str(target)]) == 1
        assert "Failed to create directory" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# generate
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.usefixtures("clean_env")
class TestGenerateCommand:
    def test_generate(self, initialized_project, monkeypatch, capsys):
        monkeypatch.chdir(initialized_project)

        assert main(["generate", "user-profile"]) == 0
        out = capsys.readouterr().out
        assert "Domain layer generated successfully" in out
        assert "Application layer generated successfully" in out
        assert "Entity 'user-profile' generated successfully!" in out
        assert "36 files written" in out
        assert (initialized_project / "src" / "core" / "domain" / "user-profile" / "entity" / "UserProfile.ts").is_file()

    def test_alias_with_only_flag(self, initialized_project, monkeypatch, capsys):
        monkeypatch.chdir(initialized_project)

        assert main(["g", "order", "--only-infrastructure"]) == 0
        out = capsys.readouterr().out
        assert "Infrastructure layer generated successfully" in out
        assert "Domain layer generated successfully" not in out
        infra = initialized_project / "src" / "infrastructure" / "persistence" / "typeorm" / "order"
        assert (infra / "TypeOrmOrder.entity.ts").is_file()

    def test_entity_name_is_normalised(self, initialized_project, monkeypatch):
        monkeypatch.chdir(initialized_project)
        assert main(["g", "  Invoice  "]) == 0
        assert (initialized_project / "src" / "core" / "domain" / "invoice").is_dir()

    def test_uninitialized_directory(self, tmp_project_dir, monkeypatch, capsys):
        monkeypatch.chdir(tmp_project_dir)

        assert main(["generate", "user"]) == 1
        captured = capsys.readouterr()
        assert "Project is not initialized" in captured.err
        assert "make-ca init" in captured.out
        assert list(tmp_project_dir.iterdir()) == []

    @pytest.mark.parametrize("name", ["user_profile", "2user", "user--profile", "order!"])
    def test_invalid_entity_name(self, initialized_project, monkeypatch, capsys, name):
        monkeypatch.chdir(initialized_project)

        assert main(["generate", name]) == 1
        assert "Invalid entity name" in capsys.readouterr().err
        assert list((initialized_project / "src" / "core" / "domain").iterdir()) == []

    def test_broken_template_override(self, initialized_project, broken_template_dir, monkeypatch, capsys):
        monkeypatch.chdir(initialized_project)
        monkeypatch.setenv("MAKE_CA_TEMPLATE_DIR", str(broken_template_dir))

        assert main(["generate", "user-profile"]) == 1
        err = capsys.readouterr().err
        assert "Failed to generate service layer" in err
        assert "Error generating entity" in err
