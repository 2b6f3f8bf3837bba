from pathlib import Path

import pytest

from scriptwiki.config.config import ConfigManager, GeneratorConfig, TocStyle
from scriptwiki.errors import ConfigError
from scriptwiki.models import ScriptFile

CONFIG_INI = """
[PATHS]
logs_directory = logs

[APP]
debug = true

[DOCGEN]
script_folder = scripts
output_folder = out
exclude_folders = Archive, Old
include_wiki_toc = true
wiki_toc_style = github
"""


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text(CONFIG_INI, encoding="utf-8")
    return path


class TestTocStyle:
    def test_parse_case_insensitive(self):
        assert TocStyle.parse("github") is TocStyle.GITHUB
        assert TocStyle.parse("AzureDevOps") is TocStyle.AZURE_DEVOPS

    def test_parse_unknown(self):
        with pytest.raises(ConfigError):
            TocStyle.parse("Confluence")


class TestGeneratorConfig:
    def test_summary_path_default_and_custom(self, tmp_path):
        config = GeneratorConfig(script_folder=tmp_path, output_folder=tmp_path / "out")
        assert config.summary_path == tmp_path / "out" / "Summary.md"
        custom = GeneratorConfig(
            script_folder=tmp_path,
            output_folder=tmp_path / "out",
            wiki_summary_output_file_name="Home.md",
        )
        assert custom.summary_path == tmp_path / "out" / "Home.md"

    def test_target_folder(self, tmp_path):
        script = ScriptFile.from_path(tmp_path / "scripts" / "Tools" / "a.ps1")
        flat = GeneratorConfig(script_folder=tmp_path, output_folder=tmp_path / "out")
        assert flat.target_folder(script) == tmp_path / "out"
        nested = GeneratorConfig(script_folder=tmp_path, output_folder=tmp_path / "out", keep_structure=True)
        assert nested.target_folder(script) == tmp_path / "out" / "Tools"

    def test_page_path(self, tmp_path):
        script = ScriptFile.from_path(tmp_path / "scripts" / "Tools" / "a.ps1")
        nested = GeneratorConfig(script_folder=tmp_path, output_folder=tmp_path / "out", keep_structure=True)
        assert nested.page_path(script) == tmp_path / "out" / "Tools" / "a.md"

    def test_toc_flags(self, tmp_path):
        base = dict(script_folder=tmp_path, output_folder=tmp_path)
        assert GeneratorConfig(**base).toc_marker is None
        azure = GeneratorConfig(include_wiki_toc=True, **base)
        assert azure.toc_marker == "[[_TOC_]]"
        assert not azure.generate_github_toc
        github = GeneratorConfig(include_wiki_toc=True, wiki_toc_style=TocStyle.GITHUB, **base)
        assert github.toc_marker is None
        assert github.generate_github_toc


class TestConfigManager:
    def test_reads_ini(self, config_file, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        manager = ConfigManager(config_file)
        assert manager.debug is True
        assert manager.logs_dir == (tmp_path / "logs").resolve()

        config = manager.build_generator_config({})
        assert config.script_folder == (tmp_path / "scripts").resolve()
        assert config.output_folder == (tmp_path / "out").resolve()
        assert config.exclude_folders == ("Archive", "Old")
        assert config.include_wiki_toc is True
        assert config.keep_structure is False
        assert config.wiki_toc_style is TocStyle.GITHUB
        assert config.wiki_summary_output_file_name is None

    def test_overrides_win(self, config_file):
        config = ConfigManager(config_file).build_generator_config({
            "output_folder": "elsewhere",
            "keep_structure": True,
            "include_wiki_toc": None,
            "exclude_folders": "Tmp",
            "wiki_toc_style": "AzureDevOps",
        })
        assert config.output_folder == Path("elsewhere")
        assert config.keep_structure is True
        assert config.include_wiki_toc is True
        assert config.exclude_folders == ("Tmp",)
        assert config.wiki_toc_style is TocStyle.AZURE_DEVOPS

    def test_defaults_without_ini(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        manager = ConfigManager()
        assert manager.config_file is None
        assert manager.logs_dir is None
        config = manager.build_generator_config({"script_folder": "s", "output_folder": "o"})
        assert config.exclude_folders == ()
        assert config.include_wiki_summary is False
        assert config.wiki_toc_style is TocStyle.AZURE_DEVOPS

    def test_finds_config_folder(self, tmp_path, monkeypatch):
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "config.ini").write_text(CONFIG_INI, encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        assert ConfigManager().config_file == Path("config") / "config.ini"

    def test_config_folder_paths_resolve_from_working_directory(self, tmp_path, monkeypatch):
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "config.ini").write_text(CONFIG_INI, encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        manager = ConfigManager()
        config = manager.build_generator_config({})
        assert config.script_folder == (tmp_path / "scripts").resolve()
        assert config.output_folder == (tmp_path / "out").resolve()
        assert manager.logs_dir == (tmp_path / "logs").resolve()

    def test_explicit_ini_elsewhere_uses_working_directory(self, config_file, tmp_path, monkeypatch):
        cwd = tmp_path / "run"
        cwd.mkdir()
        monkeypatch.chdir(cwd)
        config = ConfigManager(config_file).build_generator_config({})
        assert config.script_folder == (cwd / "scripts").resolve()

    def test_absolute_paths_are_kept(self, tmp_path, monkeypatch):
        ini = tmp_path / "abs.ini"
        ini.write_text(f"[DOCGEN]\nscript_folder = {tmp_path / 's'}\noutput_folder = {tmp_path / 'o'}\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        config = ConfigManager(ini).build_generator_config({})
        assert config.script_folder == tmp_path / "s"
        assert config.output_folder == tmp_path / "o"

    def test_required_folders(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(ConfigError):
            ConfigManager().build_generator_config({"output_folder": "o"})
        with pytest.raises(ConfigError):
            ConfigManager().build_generator_config({"script_folder": "s"})

    def test_explicit_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            ConfigManager(tmp_path / "missing.ini")
