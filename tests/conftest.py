"""Shared pytest fixtures for Bullseye tests."""
import os
import random

# Headless pygame and quiet logs; must happen before pygame/bullseye imports
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')
os.environ.setdefault('BULLSEYE_LOG_LEVEL', 'WARNING')

import pytest

from bullseye.config import load_config
from bullseye.scheduler import Scheduler
from bullseye.session import GameSession


@pytest.fixture
def rng():
    """Seeded random source so target jumps and obstacles are repeatable."""
    return random.Random(1234)


@pytest.fixture
def scheduler():
    return Scheduler()


@pytest.fixture
def slide_config():
    return load_config('slide')


@pytest.fixture
def aim_config():
    return load_config('aim')


@pytest.fixture
def slide_session(slide_config, scheduler, rng):
    return GameSession(slide_config, scheduler=scheduler, rng=rng)


@pytest.fixture
def aim_session(aim_config, scheduler, rng):
    return GameSession(aim_config, scheduler=scheduler, rng=rng)


@pytest.fixture
def recorder():
    """Collects session events: ``events = recorder(session)``."""
    def attach(session):
        events = []
        session.subscribe(events.append)
        return events
    return attach
