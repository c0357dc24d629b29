"""
End-to-end tests: documentation tree on disk to SUMMARY.md.
"""
import os

import pytest

from mdsummary.cli import main
from mdsummary.config import Settings
from mdsummary.core.constants import SUMMARY_HEADER
from mdsummary.core.exceptions import InvalidBasePathError, NotABasePathError
from mdsummary.core.models import SummaryEntry
from mdsummary.entry_points import collect_entries, generate_summary


def read_summary(root):
    return (root / "SUMMARY.md").read_text(encoding="utf-8")


class TestTreeCompleteMode:
    """Tests for create_readmes runs."""
    
    def test_sample_book(self, sample_book):
        """Test seeded root, synthesized guide index and the guide page, in order."""
        entries = generate_summary(Settings(base_path=sample_book, create_readmes=True))
        
        assert entries == [
            SummaryEntry("README.md", "Intro"),
            SummaryEntry("README.md", "README"),
            SummaryEntry("guide/README.md", "guide"),
            SummaryEntry("guide/page.md", "Page"),
        ]
        assert read_summary(sample_book) == (
            f"{SUMMARY_HEADER}\n"
            "- [Intro](README.md)\n"
            "- [README](README.md)\n"
            "  - [guide](guide/README.md)\n"
            "  - [Page](guide/page.md)\n"
        )
    
    def test_root_without_readme(self, make_doc_tree):
        """Test the root placeholder keeps an empty title."""
        root = make_doc_tree({"page.md": "# Page\n"})
        
        generate_summary(Settings(base_path=root, create_readmes=True))
        
        assert read_summary(root).splitlines() == [
            SUMMARY_HEADER,
            "- [](README.md)",
            "- [README](README.md)",
            "- [Page](page.md)",
        ]
    
    def test_every_directory_gets_an_index(self, make_doc_tree):
        """Test nested directories without README.md are completed."""
        root = make_doc_tree({
            "README.md": "# Book\n",
            "a/b/c/page.md": "# Deep\n",
        })
        
        entries = collect_entries(Settings(base_path=root, create_readmes=True))
        paths = [e.path.as_posix() for e in entries]
        
        assert "a/README.md" in paths
        assert "a/b/README.md" in paths
        assert "a/b/c/README.md" in paths
    
    def test_title_from_name(self, sample_book):
        """Test file-name titles in tree-complete mode."""
        generate_summary(Settings(base_path=sample_book, create_readmes=True, title_from_name=True))
        
        assert read_summary(sample_book).splitlines() == [
            SUMMARY_HEADER,
            "- [README](README.md)",
            f"- [{sample_book.name}](README.md)",
            "  - [guide](guide/README.md)",
            "  - [page](guide/page.md)",
        ]


class TestFlatScanMode:
    """Tests for default runs."""
    
    def test_sample_book(self, sample_book):
        """Test one entry per titled document, no placeholders."""
        generate_summary(Settings(base_path=sample_book))
        
        assert read_summary(sample_book).splitlines() == [
            SUMMARY_HEADER,
            "- [Intro](README.md)",
            "  - [Page](guide/page.md)",
        ]
    
    def test_untitled_documents_are_excluded(self, make_doc_tree):
        """Test documents without a title line are left out."""
        root = make_doc_tree({
            "README.md": "# Book\n",
            "draft.md": "todo\n",
            "notes.txt": "# Not markdown\n",
        })
        
        entries = generate_summary(Settings(base_path=root))
        
        assert entries == [SummaryEntry("README.md", "Book")]
    
    def test_custom_marker(self, make_doc_tree):
        """Test the configured trim string selects the title line."""
        root = make_doc_tree({"page.md": "# Heading\ntitle: Chosen\n"})
        
        entries = generate_summary(Settings(base_path=root, trim_str="title: "))
        
        assert entries == [SummaryEntry("page.md", "Chosen")]


class TestIdempotence:
    """Tests for repeated runs."""
    
    @pytest.mark.parametrize("create_readmes", [False, True])
    def test_second_run_is_byte_identical(self, sample_book, create_readmes):
        """Test the previous SUMMARY.md does not leak into the next one."""
        settings = Settings(base_path=sample_book, create_readmes=create_readmes)
        
        generate_summary(settings)
        first = (sample_book / "SUMMARY.md").read_bytes()
        generate_summary(settings)
        second = (sample_book / "SUMMARY.md").read_bytes()
        
        assert first == second
        assert b"mdBook/issues" not in first.split(b"\n", 1)[1]


class TestVerbose:
    """Tests for echoing lines."""
    
    def test_lines_echoed_to_stdout(self, sample_book, capsys):
        """Test stdout receives exactly the written lines."""
        generate_summary(Settings(base_path=sample_book, verbose=True))
        
        assert capsys.readouterr().out == read_summary(sample_book)
    
    def test_quiet(self, sample_book, capsys):
        """Test nothing is echoed without verbose."""
        generate_summary(Settings(base_path=sample_book))
        
        assert capsys.readouterr().out == ""
    
    def test_undecodable_file_name(self, make_doc_tree, capsys):
        """Test a file name that is not valid utf-8 is kept in the file and escaped on stdout."""
        root = make_doc_tree({"README.md": "# Intro\n"})
        try:
            (root / os.fsdecode(b"caf\xe9.md")).write_text("# Cafe\n", encoding="utf-8")
        except (OSError, UnicodeError):
            pytest.skip("filesystem rejects undecodable file names")
        
        generate_summary(Settings(base_path=root, verbose=True))
        
        assert b"- [Cafe](caf\xe9.md)\n" in (root / "SUMMARY.md").read_bytes()
        assert "- [Cafe](caf\\udce9.md)\n" in capsys.readouterr().out


class TestFatalErrors:
    """Tests for aborting runs."""
    
    def test_missing_base_path(self, temp_dir):
        """Test a missing root aborts before writing."""
        with pytest.raises(InvalidBasePathError):
            generate_summary(Settings(base_path=temp_dir / "missing"))
    
    def test_base_path_is_a_file(self, temp_dir):
        """Test a file root aborts."""
        target = temp_dir / "file.md"
        target.write_text("# x\n", encoding="utf-8")
        
        with pytest.raises(InvalidBasePathError):
            generate_summary(Settings(base_path=target))
    
    def test_foreign_listing(self, sample_book, fake_lister):
        """Test a listed path outside the root aborts the run."""
        lister = fake_lister({f"{sample_book}/**/*.md": ["/somewhere/else/page.md"]})
        
        with pytest.raises(NotABasePathError):
            generate_summary(Settings(base_path=sample_book, title_from_name=True), path_lister=lister)
        
        assert not (sample_book / "SUMMARY.md").exists()


class TestCli:
    """Tests for the mdsummary command."""
    
    def test_create_readmes(self, sample_book, capsys):
        """Test a tree-complete run from the command line."""
        main([str(sample_book), "--create_readmes"])
        
        assert "  - [guide](guide/README.md)" in read_summary(sample_book)
        assert "✓ Wrote 4 entries" in capsys.readouterr().err
    
    def test_hyphenated_options(self, sample_book):
        """Test hyphenated aliases of the options."""
        main([str(sample_book), "--create-readmes", "--title-from-name"])
        
        assert "  - [page](guide/page.md)" in read_summary(sample_book)
    
    def test_verbose(self, sample_book, capsys):
        """Test -v echoes the summary on stdout only."""
        main([str(sample_book), "-v"])
        
        captured = capsys.readouterr()
        assert captured.out == read_summary(sample_book)
        assert SUMMARY_HEADER not in captured.err
    
    def test_trim_str(self, make_doc_tree):
        """Test --trim_str selects the marker."""
        root = make_doc_tree({"page.md": "## Sub\n"})
        
        main([str(root), "--trim_str", "## "])
        
        assert "- [Sub](page.md)" in read_summary(root)
    
    def test_environment_fallback(self, sample_book, monkeypatch):
        """Test options not given on the command line come from the environment."""
        monkeypatch.setenv("MDSUMMARY_CREATE_READMES", "1")
        
        main([str(sample_book)])
        
        assert "  - [guide](guide/README.md)" in read_summary(sample_book)
    
    def test_default_base_path(self, temp_dir):
        """Test src/ is scanned when no path is given."""
        (temp_dir / "src").mkdir()
        (temp_dir / "src" / "intro.md").write_text("# Intro\n", encoding="utf-8")
        
        main([])
        
        assert "- [Intro](intro.md)" in read_summary(temp_dir / "src")
    
    def test_missing_base_path_exits(self, temp_dir, capsys):
        """Test fatal errors exit with status 1 and a diagnostic."""
        with pytest.raises(SystemExit) as exc_info:
            main([str(temp_dir / "missing")])
        
        assert exc_info.value.code == 1
        assert "❌ Error" in capsys.readouterr().err
    
    def test_empty_trim_str_exits(self, sample_book, capsys):
        """Test invalid configuration exits with status 1."""
        with pytest.raises(SystemExit) as exc_info:
            main([str(sample_book), "--trim_str", ""])
        
        assert exc_info.value.code == 1
        assert "invalid configuration" in capsys.readouterr().err
