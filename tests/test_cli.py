# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2026 The symmetric-hd Authors

"""
Tests for the command-line interface.
"""

import pytest

from symmetric_hd.cli import main

ZERO_SECRET = "00" * 32
VECTOR_KEY = "7bc626147a8441fd808a42dbfb889a083f1cbd3065b5921e1a28a53db0d3781f"


class TestCli:
    """Test CLI commands."""

    def test_derive_default_path(self, capsys):
        assert main(["derive", "--secret", ZERO_SECRET]) == 0

        out = capsys.readouterr().out
        assert f"Key:         {VECTOR_KEY}" in out
        assert "Depth:       4" in out

    def test_derive_master(self, capsys):
        assert main(["derive", "--secret", ZERO_SECRET, "--path", "m"]) == 0
        assert "Depth:       0" in capsys.readouterr().out

    def test_derive_custom_schema(self, capsys):
        code = main([
            "derive",
            "--secret", "7265706c696372",
            "--schema", "m / app: str / index: num",
            "--path", "m/wallet/7",
        ])

        assert code == 0
        assert "Depth:       2" in capsys.readouterr().out

    def test_lineage(self, capsys):
        assert main(["lineage", "--secret", ZERO_SECRET, "--path", "m/42/0/1/0"]) == 0
        assert "Lineage verified for m/42/0/1/0" in capsys.readouterr().out

    def test_lineage_single_level(self, capsys):
        assert main(["lineage", "--secret", ZERO_SECRET, "--path", "m/42"]) == 0

    def test_schema(self, capsys):
        assert main(["schema", "m /  index : num"]) == 0
        assert capsys.readouterr().out.strip() == "m / index: num"

    def test_invalid_schema(self, capsys):
        assert main(["schema", "m / index: float"]) == 1
        assert capsys.readouterr().out.startswith("Error:")

    def test_invalid_path(self, capsys):
        code = main([
            "derive",
            "--secret", ZERO_SECRET,
            "--schema", "m / index: str",
            "--path", "m/7",
        ])

        assert code == 1
        assert "label 'index'" in capsys.readouterr().out

    def test_invalid_secret(self, capsys):
        assert main(["derive", "--secret", "xyz"]) == 1
        assert "hex" in capsys.readouterr().out

    def test_hyphenated_algorithm(self, capsys):
        assert main(["--algorithm", "SHA-512", "derive", "--secret", ZERO_SECRET]) == 0
        assert "Depth:       4" in capsys.readouterr().out

    def test_unknown_algorithm(self, capsys):
        assert main(["--algorithm", "md4", "derive", "--secret", ZERO_SECRET]) == 1

    def test_command_required(self):
        with pytest.raises(SystemExit):
            main([])
