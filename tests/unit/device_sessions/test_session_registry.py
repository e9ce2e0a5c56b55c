"""
Unit tests for SessionRegistry and the DeviceSession entity.
"""
import pytest

from core.domain.exceptions import SessionSupersededError
from device_sessions.domain.session import DeviceSession
from tests.fakes import T0


class TestDeviceSession:
    """Tests for DeviceSession entity."""

    def test_matches_requires_device_and_token(self):
        session = DeviceSession.create("user@example.com", "d1", "t1", T0)

        assert session.matches("d1", "t1")
        assert not session.matches("d2", "t1")
        assert not session.matches("d1", "t2")
        assert not session.matches("", "")

    def test_token_required(self):
        with pytest.raises(ValueError, match="token is required"):
            DeviceSession.create("user@example.com", "d1", "", T0)


@pytest.mark.asyncio
class TestSessionRegistry:
    """Tests for SessionRegistry."""

    async def test_establish_first_session(self, registry):
        session, superseded = await registry.establish("user@example.com", "d1", "t1", T0)

        assert str(session.device_id) == "d1"
        assert superseded is None
        assert await registry.matches("user@example.com", "d1", "t1")

    async def test_establish_supersedes_other_device(self, registry):
        await registry.establish("user@example.com", "d1", "t1", T0)

        _, superseded = await registry.establish("user@example.com", "d2", "t2", T0)

        assert str(superseded.device_id) == "d1"
        assert not await registry.matches("user@example.com", "d1", "t1")
        assert await registry.matches("user@example.com", "d2", "t2")

    async def test_relogin_on_same_device_is_not_a_supersession(self, registry):
        await registry.establish("user@example.com", "d1", "t1", T0)

        _, superseded = await registry.establish("user@example.com", "d1", "t2", T0)

        assert superseded is None
        assert not await registry.matches("user@example.com", "d1", "t1")
        assert await registry.matches("user@example.com", "d1", "t2")

    async def test_current(self, registry):
        assert await registry.current("user@example.com") is None

        await registry.establish("user@example.com", "d1", "t1", T0)
        current = await registry.current("user@example.com")

        assert str(current.device_id) == "d1"
        assert current.token == "t1"

    async def test_matches_without_session(self, registry):
        assert not await registry.matches("nobody@example.com", "d1", "t1")

    async def test_sessions_are_per_account(self, registry):
        await registry.establish("a@example.com", "d1", "t1", T0)
        await registry.establish("b@example.com", "d2", "t2", T0)

        assert await registry.matches("a@example.com", "d1", "t1")
        assert await registry.matches("b@example.com", "d2", "t2")

    async def test_reassert_swaps_token(self, registry):
        await registry.establish("user@example.com", "d1", "t1", T0)

        await registry.reassert("user@example.com", "d1", "t1", "t1b", T0)

        assert await registry.matches("user@example.com", "d1", "t1b")
        assert not await registry.matches("user@example.com", "d1", "t1")

    async def test_reassert_after_supersession_fails(self, registry):
        await registry.establish("user@example.com", "d1", "t1", T0)
        await registry.establish("user@example.com", "d2", "t2", T0)

        with pytest.raises(SessionSupersededError):
            await registry.reassert("user@example.com", "d1", "t1", "t1b", T0)

        assert await registry.matches("user@example.com", "d2", "t2")
