"""Tests for python -m gommit entry point."""
from __future__ import annotations

import subprocess
import sys


class TestMainModule:
    def test_module_imports_main(self) -> None:
        """__main__.py should import the cli main function."""
        import gommit.__main__ as m

        assert hasattr(m, "main")
        assert callable(m.main)

    def test_python_m_gommit_help(self) -> None:
        result = subprocess.run(
            [sys.executable, "-m", "gommit", "--help"],
            capture_output=True,
            text=True,
            timeout=10,
        )
        assert result.returncode == 0
        assert "Usage" in result.stdout

    def test_python_m_gommit_list_rules(self) -> None:
        result = subprocess.run(
            [sys.executable, "-m", "gommit", "list-rules"],
            capture_output=True,
            text=True,
            timeout=10,
        )
        assert result.returncode == 0
        assert "header-format" in result.stdout
