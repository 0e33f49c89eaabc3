"""Shared fixtures: an in-memory MongoDB behind Beanie."""

import asyncio
import sys
from pathlib import Path

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent))

# Configure logfire before importing modules that use it
import logfire
logfire.configure(send_to_logfire=False, console=False)

import pytest
from mongomock_motor import AsyncMongoMockClient

from database import init_db


@pytest.fixture
def run_db():
    """
    Run an async scenario against a fresh mock database.

    Usage:
        def test_something(run_db):
            async def scenario():
                ...
            run_db(scenario)
    """

    def runner(scenario):
        async def _run():
            client = AsyncMongoMockClient()
            await init_db(client["studyhub_test"])
            return await scenario()

        return asyncio.run(_run())

    return runner
