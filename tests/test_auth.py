import pytest
from fastapi import HTTPException

from src.core.auth import get_verified_signer


class TestVerifiedSigner:
    """上游写入的签名地址"""

    @pytest.mark.asyncio
    async def test_value_passed_through_unchanged(self):
        assert await get_verified_signer(" 0xA ") == " 0xA "

    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", [None, "", "   "])
    async def test_blank_value_rejected(self, value):
        with pytest.raises(HTTPException) as exc_info:
            await get_verified_signer(value)
        assert exc_info.value.status_code == 401
