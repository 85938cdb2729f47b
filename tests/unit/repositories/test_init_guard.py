"""Tests for one-shot repository initialisation."""

import asyncio

import pytest

from racing.exceptions import InitializationError
from racing.repositories import InitGuard, InitState


class TestInitGuard:
    """Tests for InitGuard."""

    @pytest.mark.asyncio
    async def test_concurrent_callers_run_action_once(self):
        """Many concurrent callers trigger a single execution."""
        guard = InitGuard("races")
        calls = 0

        async def action():
            nonlocal calls
            calls += 1
            await asyncio.sleep(0.01)

        results = await asyncio.gather(*(guard.run(action) for _ in range(10)))

        assert calls == 1
        assert results == [None] * 10
        assert guard.state is InitState.DONE

    @pytest.mark.asyncio
    async def test_late_callers_do_not_rerun(self):
        """Calls after completion return without running the action."""
        guard = InitGuard("races")
        calls = 0

        async def action():
            nonlocal calls
            calls += 1

        await guard.run(action)
        await guard.run(action)
        await guard.run(action)

        assert calls == 1

    @pytest.mark.asyncio
    async def test_state_is_in_progress_while_running(self):
        """State moves UNINITIALIZED -> IN_PROGRESS -> DONE."""
        guard = InitGuard("races")
        seen = []

        async def action():
            seen.append(guard.state)

        assert guard.state is InitState.UNINITIALIZED
        await guard.run(action)

        assert seen == [InitState.IN_PROGRESS]
        assert guard.state is InitState.DONE

    @pytest.mark.asyncio
    async def test_failure_is_shared_by_concurrent_callers(self):
        """Every concurrent caller sees the same error."""
        guard = InitGuard("races")
        calls = 0
        cause = RuntimeError("disk full")

        async def action():
            nonlocal calls
            calls += 1
            await asyncio.sleep(0.01)
            raise cause

        results = await asyncio.gather(
            *(guard.run(action) for _ in range(5)),
            return_exceptions=True,
        )

        assert calls == 1
        assert all(isinstance(result, InitializationError) for result in results)
        assert all(result is results[0] for result in results)
        assert results[0].__cause__ is cause

    @pytest.mark.asyncio
    async def test_failure_is_permanent(self):
        """A failed action is never retried."""
        guard = InitGuard("races")
        calls = 0

        async def action():
            nonlocal calls
            calls += 1
            if calls == 1:
                raise ValueError("bad seed data")

        with pytest.raises(InitializationError) as first:
            await guard.run(action)
        with pytest.raises(InitializationError) as second:
            await guard.run(action)

        assert calls == 1
        assert second.value is first.value
        assert "bad seed data" in str(first.value)
