"""Tests for reward withdrawals."""

import bech32
import pytest

from tx_decoder.cardano.withdrawals import format_withdrawals, lovelace_to_ada
from tx_decoder.codec.values import Array, ByteString, Map, Tagged, TextString, UInt


class TestLovelaceToAda:
    """Six-decimal ADA text."""

    @pytest.mark.parametrize("lovelace,expected", [
        (0, "0"),
        (1, "0.000001"),
        (5_000_000, "5"),
        (1_500_000, "1.5"),
        (1_234_567_891, "1234.567891"),
        (-2_500_000, "-2.5"),
        (10**30, str(10**24)),
    ])
    def test_conversion(self, lovelace, expected):
        """Trailing zeros are trimmed."""
        assert lovelace_to_ada(lovelace) == expected


class TestWithdrawals:
    """Withdrawal maps."""

    def test_single_entry(self, reward_account):
        """One withdrawal of 5 ADA."""
        result = format_withdrawals(Map(((ByteString(reward_account), UInt(5_000_000)),)))
        assert result["total_amount"] == "5000000"
        assert result["total_amount_ada"] == "5"
        assert len(result["entries"]) == 1
        entry = result["entries"][0]
        assert entry["reward_account"] == reward_account.hex()
        assert entry["amount"] == "5000000"
        hrp, words = bech32.bech32_decode(entry["reward_address"])
        assert hrp == "stake"
        assert bytes(bech32.convertbits(words, 5, 8, False)) == reward_account

    def test_sum(self, key_hash):
        """Amounts are summed exactly."""
        result = format_withdrawals(Map((
            (ByteString(b"\xe0" + key_hash), UInt(1_500_000)),
            (ByteString(b"\xf0" + key_hash), UInt(250)),
        )))
        assert result["total_amount"] == "1500250"
        assert result["total_amount_ada"] == "1.50025"
        assert all(e["reward_address"].startswith("stake_test1") for e in result["entries"])

    def test_big_amounts(self, reward_account):
        """Bignum amounts do not lose precision."""
        big = Tagged(2, ByteString(b"\x01" + bytes(10)))
        result = format_withdrawals(Map(((ByteString(reward_account), big),)))
        assert result["total_amount"] == str(2**80)

    def test_duplicate_keys_last_wins(self, reward_account):
        """A repeated reward account keeps the last amount."""
        result = format_withdrawals(Map((
            (ByteString(reward_account), UInt(1)),
            (ByteString(reward_account), UInt(2)),
        )))
        assert result["total_amount"] == "2"
        assert len(result["entries"]) == 1

    def test_empty_is_none(self):
        """An empty map normalizes to None."""
        assert format_withdrawals(Map(())) is None
        assert format_withdrawals(Tagged(258, Map(()))) is None

    def test_non_hex_key_kept(self):
        """A key that is not hex keeps its text as the address."""
        result = format_withdrawals(Map(((TextString("someone"), UInt(3)),)))
        assert result["entries"][0]["reward_address"] == "someone"

    def test_non_coin_amount(self, reward_account):
        """Non-coin amounts are kept but not summed."""
        result = format_withdrawals(Map((
            (ByteString(reward_account), Array((UInt(1),))),
        )))
        assert result["total_amount"] == "0"
        assert result["entries"][0]["amount"] == [1]

    def test_non_map_generic(self):
        """Non-map values use generic formatting."""
        assert format_withdrawals(Array((UInt(1),))) == [1]

    def test_idempotent(self, reward_account):
        """Formatted withdrawals survive another pass."""
        once = format_withdrawals(Map(((ByteString(reward_account), UInt(7)),)))
        assert format_withdrawals(once) == once
