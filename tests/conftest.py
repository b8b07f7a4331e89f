"""Shared fixtures"""
import logging

import pytest

from record_deduper.common import config as config_module
from record_deduper.common.config import Config


AMBIENT_ENV_VARS = [
    'OUTPUT_UNIQUE_SUFFIX',
    'OUTPUT_DUPLICATE_SUFFIX',
    'OUTPUT_ATOMIC',
    'IO_ENCODING',
    'LOGGING_LEVEL',
    'LOGGING_FORMAT',
]


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep env overrides, global config and CLI log handlers out of other tests"""
    for name in AMBIENT_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config_module, '_global_config', None)

    yield

    logger = logging.getLogger("record_deduper")
    logger.handlers = []
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def config():
    return Config()


@pytest.fixture
def nick_names():
    return {'Bob': 'Robert', 'Rob': 'Robert'}


@pytest.fixture
def pipe_records():
    return [
        "1|Robert|Smith   |Waverley",
        "2|robert|Smith   |Waverley",
        "3|bob|Smith  |Waverley",
        "4|Rob|Smith|Waverley",
        "5|Bob|O'Brien   |Bronte",
        "6|Bob|O'Brien   |Bronte",
    ]


@pytest.fixture
def fixed_width_records():
    """Same people as pipe_records: number 1-2, name 3-8, surname 10-17, suburb 18+"""
    rows = [
        ("1", "Robert", "Smith", "Waverley"),
        ("2", "robert", "Smith", "Waverley"),
        ("3", "bob", "Smith", "Waverley"),
        ("4", "Rob", "Smith", "Waverley"),
        ("5", "Bob", "O'Brien", "Bronte"),
        ("6", "Bob", "O'Brien", "Bronte"),
    ]
    return [f"{num:<2}{name:<6} {surname:<8}{suburb}" for num, name, surname, suburb in rows]
