"""Tests for the command line interface."""

import json
import pytest

from cli import main, parse_args


class TestParseArgs:
    """Tests for argument parsing."""
    
    def test_defaults(self):
        """Test default options."""
        parsed = parse_args(["a.txt", "b.txt"])
        
        assert parsed.paths == ["a.txt", "b.txt"]
        assert parsed.check is False
        assert parsed.format == "text"
        assert parsed.max_workers is None
    
    def test_invalid_max_workers(self):
        """Test a zero worker bound is rejected."""
        with pytest.raises(SystemExit) as excinfo:
            parse_args(["--max-workers", "0", "a.txt"])
        
        assert excinfo.value.code == 2


class TestMain:
    """Tests for the main entry point."""
    
    def test_rewrites_files(self, tmp_path):
        """Test files are rewritten and exit status is 0."""
        path = tmp_path / "a.txt"
        path.write_text("a  b <i>  c  </i>", encoding="utf-8")
        
        assert main([str(path)]) == 0
        assert path.read_text(encoding="utf-8") == "a b <i>  c  </i>"
    
    def test_no_paths(self):
        """Test running without paths does nothing."""
        assert main([]) == 0
    
    def test_check_mode(self, tmp_path, capsys):
        """Test --check reports without writing."""
        dirty = tmp_path / "dirty.txt"
        clean = tmp_path / "clean.txt"
        dirty.write_text("a  b", encoding="utf-8")
        clean.write_text("a b", encoding="utf-8")
        
        assert main(["--check", str(dirty), str(clean)]) == 1
        assert dirty.read_text(encoding="utf-8") == "a  b"
        
        err = capsys.readouterr().err
        assert f"would rewrite: {dirty}" in err
        assert str(clean) not in err
    
    def test_check_mode_clean(self, tmp_path):
        """Test --check exits 0 when nothing would change."""
        clean = tmp_path / "clean.txt"
        clean.write_text("a b", encoding="utf-8")
        
        assert main(["--check", str(clean)]) == 0
    
    def test_failure_exit_status(self, tmp_path, capsys):
        """Test a failed path gives exit status 1 but others are processed."""
        good = tmp_path / "good.txt"
        good.write_text("a   b", encoding="utf-8")
        missing = tmp_path / "missing.txt"
        
        assert main([str(missing), str(good)]) == 1
        assert good.read_text(encoding="utf-8") == "a b"
        assert str(missing) in capsys.readouterr().err
    
    def test_verbose_json(self, tmp_path, capsys):
        """Test the JSON summary."""
        path = tmp_path / "a.txt"
        path.write_text("a  b", encoding="utf-8")
        
        assert main(["-v", "-f", "json", str(path)]) == 0
        
        data = json.loads(capsys.readouterr().out)
        assert data["summary"]["modified"] == 1
        assert data["files"][0]["status"] == "modified"
    
    def test_verbose_text(self, tmp_path, capsys):
        """Test the text summary lists unchanged files too."""
        path = tmp_path / "a.txt"
        path.write_text("a b", encoding="utf-8")
        
        assert main(["-v", str(path)]) == 0
        
        out = capsys.readouterr().out
        assert "- " in out
        assert out.strip().endswith("0 modified, 1 unchanged, 0 failed")
