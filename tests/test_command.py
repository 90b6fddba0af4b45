import pytest

from src.core.exceptions import MalformedCommand
from src.core.services.command import decode_command


class TestDecodeCommand:
    """签名消息解析"""

    def test_decodes_integer_id(self):
        assert decode_command('{"id": 42}') == 42

    def test_numeric_string_id_is_coerced(self):
        assert decode_command('{"id": "42"}') == 42

    def test_extra_fields_are_ignored(self):
        assert decode_command('{"id": 7, "action": "accept", "nonce": 3}') == 7

    def test_bytes_payload(self):
        assert decode_command(b'{"id": 5}') == 5

    @pytest.mark.parametrize("message", [
        "not json",
        "",
        "{",
        "[42]",
        "42",
        "null",
        "{}",
        '{"request_id": 42}',
        '{"id": ""}',
        '{"id": null}',
        '{"id": "abc"}',
        '{"id": 0}',
        '{"id": -3}',
        '{"id": 4.5}',
        '{"id": true}',
        '{"id": false}',
        '{"id": 2147483648}',
        '{"id": 99999999999999999999}',
    ])
    def test_malformed_messages(self, message):
        with pytest.raises(MalformedCommand):
            decode_command(message)

    def test_non_string_message(self):
        with pytest.raises(MalformedCommand):
            decode_command({"id": 42})

    def test_is_deterministic(self):
        message = '{"id": 99}'
        assert decode_command(message) == decode_command(message)

    def test_largest_request_id(self):
        assert decode_command('{"id": 2147483647}') == 2147483647
