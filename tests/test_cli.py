"""
zkscrypto CLI Tests
"""

import json

from zkscrypto.cli import main


class TestCli:
    """Tests for the command line entry point."""

    def test_default_run(self, capsys):
        """Test every artifact is printed."""
        assert main([]) == 0
        lines = capsys.readouterr().out.strip().splitlines()
        labels = [line.split(":")[0] for line in lines]
        assert labels == ["Seed", "Private key", "Public key", "Public key hash", "Signature"]
        assert lines[0] == "Seed: " + "00" * 32

    def test_seed_and_message(self, capsys):
        """Test explicit seed and message."""
        assert main(["--seed", "0x" + "01" * 32, "--message", "hi"]) == 0
        out = capsys.readouterr().out
        values = dict(line.split(": ", 1) for line in out.strip().splitlines())
        assert len(values["Private key"]) == 64
        assert len(values["Public key hash"]) == 40
        assert len(values["Signature"]) == 128

    def test_short_seed(self, capsys):
        """Test short seed exits with an error."""
        assert main(["--seed", "01" * 31]) == 1
        assert "too short" in capsys.readouterr().err

    def test_bad_seed_hex(self, capsys):
        """Test non-hex seed exits with an error."""
        assert main(["--seed", "nothex"]) == 1
        assert "Error" in capsys.readouterr().err

    def test_message_too_long(self, capsys):
        """Test long message exits with an error."""
        assert main(["--message", "x" * 93]) == 1
        assert "92" in capsys.readouterr().err

    def test_config_file(self, tmp_path, capsys):
        """Test configuration file is applied."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"hex_prefix": True}))
        assert main(["--config", str(path)]) == 0
        out = capsys.readouterr().out
        assert "Public key: 0x" in out

    def test_invalid_log_level(self, capsys):
        """Test invalid log level is refused."""
        assert main(["--log-level", "LOUD"]) == 1
        assert "Invalid configuration" in capsys.readouterr().err

    def test_missing_config_file(self, tmp_path, capsys):
        """Test missing configuration file exits with an error."""
        assert main(["--config", str(tmp_path / "absent.json")]) == 1
        assert "cannot load configuration" in capsys.readouterr().err

    def test_config_not_json(self, tmp_path, capsys):
        """Test malformed JSON exits with an error."""
        path = tmp_path / "config.json"
        path.write_text("{not json")
        assert main(["--config", str(path)]) == 1
        assert "cannot load configuration" in capsys.readouterr().err

    def test_config_unknown_log_key(self, tmp_path, capsys):
        """Test unknown log settings exit with an error."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"log": {"colour": "red"}}))
        assert main(["--config", str(path)]) == 1
        assert "colour" in capsys.readouterr().err

    def test_config_not_object(self, tmp_path, capsys):
        """Test a JSON array configuration exits with an error."""
        path = tmp_path / "config.json"
        path.write_text("[1, 2]")
        assert main(["--config", str(path)]) == 1
        assert "JSON object" in capsys.readouterr().err
