import pytest

from scriptwiki.main import main


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    # nessun config.ini deve essere trovato nella cartella corrente
    monkeypatch.chdir(tmp_path)


def base_args(tmp_path):
    return [
        "--script-folder", str(tmp_path / "scripts"),
        "--output-folder", str(tmp_path / "out"),
        "--exclude-folders", "Archive",
    ]


class TestMain:
    def test_partial_success(self, script_tree, tmp_path, capsys):
        assert main(base_args(tmp_path)) == 1
        assert (tmp_path / "out" / "Backup-Logs.md").exists()
        assert "2 documented" in capsys.readouterr().out

    def test_success(self, script_tree, tmp_path):
        (script_tree / "Tools" / "No-Help.ps1").unlink()
        args = base_args(tmp_path) + [
            "--keep-structure",
            "--include-wiki-summary",
            "--include-wiki-toc",
            "--wiki-toc-style", "Github",
            "--wiki-summary-output-file-name", "Index.md",
        ]
        assert main(args) == 0
        page = tmp_path / "out" / "Backup" / "Backup-Logs.md"
        assert page.read_text(encoding="utf-8").startswith("- [Synopsis](#synopsis)")
        assert (tmp_path / "out" / "Index.md").exists()

    def test_missing_script_folder(self, tmp_path):
        assert main(base_args(tmp_path)) == 3

    def test_output_folder_is_a_file(self, script_tree, tmp_path):
        (tmp_path / "out").write_text("not a folder")
        assert main(base_args(tmp_path)) == 3

    def test_nested_output_folder(self, script_tree, tmp_path):
        out = tmp_path / "a" / "b" / "wiki"
        args = ["--script-folder", str(tmp_path / "scripts"), "--output-folder", str(out)]
        assert main(args + ["--exclude-folders", "Archive"]) == 1
        assert (out / "Get-Greeting.md").exists()

    def test_missing_required_folder_is_usage_error(self, tmp_path):
        with pytest.raises(SystemExit) as excinfo:
            main(["--script-folder", str(tmp_path)])
        assert excinfo.value.code == 2

    def test_invalid_toc_style(self, tmp_path):
        with pytest.raises(SystemExit) as excinfo:
            main(base_args(tmp_path) + ["--wiki-toc-style", "Wiki"])
        assert excinfo.value.code == 2

    def test_config_file_supplies_defaults(self, script_tree, tmp_path):
        (tmp_path / "config.ini").write_text(
            "[DOCGEN]\n"
            "script_folder = scripts\n"
            "output_folder = wiki\n"
            "exclude_folders = Archive\n"
            "include_wiki_summary = true\n",
            encoding="utf-8",
        )
        assert main([]) == 1
        assert (tmp_path / "wiki" / "Summary.md").exists()
        assert not (tmp_path / "wiki" / "Old-Script.md").exists()
