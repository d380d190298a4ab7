"""
tests/test_receipts.py - Receipt Foundation Tests
"""

import io
import json

from receipts import RECEIPT_FIELDS, dual_hash, emit_receipt, write_receipt_jsonl


class TestDualHash:
    """dual_hash format."""

    def test_two_hex_parts(self):
        parts = dual_hash("abcde").split(":")
        assert len(parts) == 2
        for part in parts:
            assert len(part) == 64, f"Hash part should be 64 chars, got {len(part)}"
            assert all(c in "0123456789abcdef" for c in part)

    def test_str_and_bytes_agree(self):
        assert dual_hash("s1,x3/4,pe/b") == dual_hash(b"s1,x3/4,pe/b")

    def test_parts_differ(self):
        sha, b3 = dual_hash("abcde").split(":")
        assert sha != b3


class TestEmitReceipt:
    """emit_receipt fields."""

    def test_standard_fields(self):
        receipt = emit_receipt("dance_complete", {"final_state": "baedc"})
        assert receipt["receipt_type"] == "dance_complete"
        assert receipt["tenant_id"] == "dance"
        assert receipt["final_state"] == "baedc"
        assert "ts" in receipt
        assert ":" in receipt["payload_hash"]

    def test_has_every_receipt_field(self):
        receipt = emit_receipt("dance_complete", {"rounds": 1})
        for field in RECEIPT_FIELDS:
            assert field in receipt, f"Missing receipt field '{field}'"

    def test_tenant_passthrough(self):
        receipt = emit_receipt("cycle_detected", {"tenant_id": "t1"})
        assert receipt["tenant_id"] == "t1"

    def test_payload_hash_ignores_timestamp(self):
        a = emit_receipt("x", {"state": "abc"})
        b = emit_receipt("x", {"state": "abc"})
        assert a["payload_hash"] == b["payload_hash"]


class TestWriteReceiptJsonl:
    """JSONL sink."""

    def test_one_line_per_receipt(self):
        fh = io.StringIO()
        write_receipt_jsonl(emit_receipt("a", {"n": 1}), fh)
        write_receipt_jsonl(emit_receipt("b", {"n": 2}), fh)
        lines = fh.getvalue().splitlines()
        assert len(lines) == 2
        assert json.loads(lines[0])["receipt_type"] == "a"
        assert json.loads(lines[1])["n"] == 2
