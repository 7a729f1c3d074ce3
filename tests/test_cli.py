"""Tests for the tx-decoder command line."""

import io
import json

import pytest

from helpers import to_hex
from tx_decoder.cli import main
from tx_decoder.codec.hashes import compute_transaction_hash
from tx_decoder.codec.values import NULL, Array, Bool, Map, UInt


@pytest.fixture
def tx_hex():
    return to_hex(Array((Map(((UInt(2), UInt(170_000)), (UInt(42), UInt(1)))), Map(()), Bool(True), NULL)))


class TestCli:
    """Argument handling and output."""

    def test_decode(self, tx_hex, capsys):
        """Prints the decoded transaction as JSON."""
        assert main([tx_hex]) == 0
        output = json.loads(capsys.readouterr().out)
        assert output["body"] == {"fee": "170000", "field_42": 1}
        assert "transaction_hash" not in output

    def test_hash(self, tx_hex, capsys):
        """--hash adds the transaction id."""
        assert main(["--hash", tx_hex]) == 0
        output = json.loads(capsys.readouterr().out)
        assert output["transaction_hash"] == compute_transaction_hash(tx_hex)

    def test_drop_unknown_fields(self, tx_hex, capsys):
        """--drop-unknown-fields removes field_<key> entries."""
        assert main(["--drop-unknown-fields", tx_hex]) == 0
        assert json.loads(capsys.readouterr().out)["body"] == {"fee": "170000"}

    def test_stdin(self, tx_hex, capsys, monkeypatch):
        """'-' reads the payload from stdin."""
        monkeypatch.setattr("sys.stdin", io.StringIO(tx_hex + "\n"))
        assert main(["-"]) == 0
        assert json.loads(capsys.readouterr().out)["is_valid"] is True

    def test_failure_exit_code(self, capsys):
        """Error envelopes exit with 1."""
        assert main(["zz"]) == 1
        output = json.loads(capsys.readouterr().out)
        assert output["error"] == "Deserialization failed"
        assert output["raw"] == "zz"

    def test_max_depth(self, capsys):
        """--max-depth is passed to the parser."""
        assert main(["--max-depth", "1", "818180"]) == 1
        assert "NESTING_TOO_DEEP" in json.loads(capsys.readouterr().out)["message"]

    def test_invalid_max_depth(self, capsys):
        """Non-positive depths are rejected by argparse."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--max-depth", "0", "80"])
        assert exc_info.value.code == 2
