"""Shared pytest fixtures for glowbaby."""

import sqlite3
from datetime import datetime
import pytest
import pytz

TZ_NAME = "America/Chicago"

SCHEMA = """
CREATE TABLE Babies (
    BabyID INTEGER NOT NULL PRIMARY KEY,
    FirstName TEXT NOT NULL,
    LastName TEXT NOT NULL,
    Birthday TEXT NOT NULL,
    SyncTime INTEGER,
    SyncToken TEXT
);

CREATE TABLE BabyData (
    ID INTEGER NOT NULL PRIMARY KEY,
    BabyID INTEGER NOT NULL,
    StartTimestamp INTEGER NOT NULL,
    EndTimestamp INTEGER,
    Key TEXT,
    ValInt INTEGER,
    ValFloat REAL,
    ValStr TEXT
);

CREATE TABLE BabyFeedData (
    ID INTEGER NOT NULL PRIMARY KEY,
    BabyID INTEGER NOT NULL,
    StartTimestamp INTEGER NOT NULL,
    EndTimestamp INTEGER,
    FeedType INTEGER,
    BreastUsed TEXT,
    BreastLeft INTEGER,
    BreastRight INTEGER,
    BottleML REAL
);
"""


@pytest.fixture
def tz():
    return pytz.timezone(TZ_NAME)


@pytest.fixture
def local_ts(tz):
    """Unix timestamp of a local wall-clock time in America/Chicago."""

    def _local_ts(year, month, day, hour=0, minute=0, second=0):
        return int(tz.localize(datetime(year, month, day, hour, minute, second)).timestamp())

    return _local_ts


@pytest.fixture
def zero(tz):
    return tz.localize(datetime(2022, 1, 1))


@pytest.fixture
def empty_db(tmp_path):
    path = tmp_path / "baby.db"
    conn = sqlite3.connect(path)
    conn.executescript(SCHEMA)
    conn.commit()
    conn.close()
    return str(path)


@pytest.fixture
def baby_db(empty_db, local_ts):
    conn = sqlite3.connect(empty_db)
    conn.execute(
        "INSERT INTO Babies(BabyID, FirstName, LastName, Birthday) VALUES (?, ?, ?, ?)",
        (7, "Ada", "Lovelace", "2022-01-01"),
    )
    sleeps = [
        (1, local_ts(2022, 1, 2, 22), local_ts(2022, 1, 3, 2), "sleep"),
        (2, local_ts(2022, 1, 3, 13), local_ts(2022, 1, 3, 14), "sleep"),
        (3, local_ts(2022, 1, 3, 9), local_ts(2022, 1, 3, 9, 30), "tummy"),
        (4, local_ts(2022, 1, 4, 20), None, "sleep"),
    ]
    conn.executemany(
        "INSERT INTO BabyData(ID, BabyID, StartTimestamp, EndTimestamp, Key) VALUES (?, 7, ?, ?, ?)",
        sleeps,
    )
    feeds = [
        (1, local_ts(2022, 1, 2, 8), 600, 300),
        (2, local_ts(2022, 1, 2, 23, 55), 600, 0),
        (3, local_ts(2022, 1, 3, 4), 420, None),
    ]
    conn.executemany(
        "INSERT INTO BabyFeedData(ID, BabyID, StartTimestamp, BreastLeft, BreastRight) VALUES (?, 7, ?, ?, ?)",
        feeds,
    )
    conn.commit()
    conn.close()
    return empty_db


@pytest.fixture
def conn(baby_db):
    conn = sqlite3.connect(baby_db)
    yield conn
    conn.close()
