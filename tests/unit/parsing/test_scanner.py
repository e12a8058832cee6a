"""
Unit tests for source file discovery.
"""

from pathlib import Path

from modmap.core.manifest import ProjectSettings, ScanSection
from modmap.parsing.scanner import ScanConfig, SourceScanner, discover_source_files


def _relative(root: Path, paths):
    return [p.relative_to(root).as_posix() for p in paths]


class TestScanConfig:

    def test_defaults(self, tmp_path):
        cfg = ScanConfig(root_dir=tmp_path)
        assert cfg.file_extensions == {"ts", "tsx", "js", "jsx", "mjs", "cjs"}
        assert cfg.should_skip_dir("node_modules")
        assert cfg.should_skip_dir(".git")
        assert not cfg.should_skip_dir("src")

    def test_defaults_are_not_shared(self, tmp_path):
        first = ScanConfig(root_dir=tmp_path)
        first.skip_dirs.add("vendor")
        assert not ScanConfig(root_dir=tmp_path).should_skip_dir("vendor")

    def test_is_source_file(self, tmp_path):
        cfg = ScanConfig(root_dir=tmp_path)
        assert cfg.is_source_file(Path("a.ts"))
        assert cfg.is_source_file(Path("types.d.ts"))
        assert cfg.is_source_file(Path("config.cjs"))
        assert not cfg.is_source_file(Path("README.md"))
        assert not cfg.is_source_file(Path("Makefile"))

    def test_from_settings_overrides(self, tmp_path):
        settings = ProjectSettings(scan=ScanSection(extensions=[".ts", "tsx"], ignore_dirs=["gen"]))
        cfg = ScanConfig.from_settings(tmp_path, settings)
        assert cfg.root_dir == tmp_path
        assert cfg.file_extensions == {"ts", "tsx"}
        assert cfg.skip_dirs == {"gen"}

    def test_from_settings_keeps_defaults(self, tmp_path):
        cfg = ScanConfig.from_settings(tmp_path, ProjectSettings())
        assert cfg.file_extensions == ScanConfig().file_extensions
        assert cfg.skip_dirs == ScanConfig().skip_dirs


class TestSourceScanner:

    def test_extension_filter(self, make_project):
        root = make_project({
            "a.ts": "", "b.tsx": "", "c.js": "", "d.jsx": "", "e.mjs": "", "f.cjs": "",
            "style.css": "", "script.py": "", "notes.txt": "",
        })
        found = _relative(root, SourceScanner(ScanConfig(root_dir=root)).discover())
        assert found == ["a.ts", "b.tsx", "c.js", "d.jsx", "e.mjs", "f.cjs"]

    def test_ignored_directories_at_any_depth(self, make_project):
        root = make_project({
            "src/app.ts": "",
            "node_modules/react/index.js": "",
            "packages/ui/node_modules/lib/index.js": "",
            "dist/bundle.js": "",
            "build/out.js": "",
            "coverage/lcov.js": "",
            ".git/hooks/pre-commit.js": "",
            "packages/ui/src/button.tsx": "",
        })
        found = _relative(root, discover_source_files(root))
        assert found == ["packages/ui/src/button.tsx", "src/app.ts"]

    def test_similar_names_are_not_ignored(self, make_project):
        root = make_project({
            "builder/make.ts": "",
            "buildTools.ts": "",
            "dist-utils/x.js": "",
        })
        found = _relative(root, discover_source_files(root))
        assert found == ["buildTools.ts", "builder/make.ts", "dist-utils/x.js"]

    def test_root_inside_ignored_directory_yields_nothing(self, tmp_path):
        root = tmp_path / "build" / "app"
        root.mkdir(parents=True)
        (root / "a.ts").write_text("")
        assert list(SourceScanner(ScanConfig(root_dir=root)).discover()) == []

    def test_root_named_like_ignored_directory(self, tmp_path):
        root = tmp_path / "node_modules"
        root.mkdir()
        (root / "index.js").write_text("")
        assert list(discover_source_files(root)) == []

    def test_root_check_uses_configured_skip_dirs(self, tmp_path):
        root = tmp_path / "build" / "app"
        root.mkdir(parents=True)
        (root / "a.ts").write_text("")
        cfg = ScanConfig(root_dir=root, skip_dirs={"node_modules"})
        assert _relative(root, SourceScanner(cfg).discover()) == ["a.ts"]

    def test_order_is_stable(self, make_project):
        root = make_project({
            "z.ts": "", "a.ts": "", "m/b.ts": "", "m/a.ts": "", "c/z.js": "",
        })
        first = list(discover_source_files(root))
        second = list(discover_source_files(root))
        assert first == second
        assert _relative(root, first) == ["a.ts", "z.ts", "c/z.js", "m/a.ts", "m/b.ts"]

    def test_missing_root_yields_nothing(self, tmp_path):
        assert list(discover_source_files(tmp_path / "missing")) == []

    def test_custom_extensions(self, make_project):
        root = make_project({"a.ts": "", "b.js": ""})
        cfg = ScanConfig(root_dir=root, file_extensions={"js"})
        assert _relative(root, SourceScanner(cfg).discover()) == ["b.js"]
