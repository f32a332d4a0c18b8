"""
Read babies and their recorded events from the database written by sync.
"""

import sqlite3
from datetime import datetime
from typing import List, Tuple
import pandas as pd
import pytz


class BabyInfo:
    def __init__(self, baby_id: int, first_name: str, last_name: str, birthday: datetime):
        self.baby_id = baby_id
        self.first_name = first_name
        self.last_name = last_name
        # local midnight on the day of birth
        self.birthday = birthday

    def get_full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def get_birthday_str(self) -> str:
        return self.birthday.strftime("%Y-%m-%d")


def open_db(path: str) -> sqlite3.Connection:
    """Open the database file read-only.

    Raises:
        sqlite3.OperationalError: if the file does not exist
    """
    return sqlite3.connect(f"file:{path}?mode=ro", uri=True)


def parse_birthday(bday: str, tz) -> datetime:
    """
    E.g. bday '2022-01-01'
    returns 2022-01-01 00:00 localized to tz
    """
    if isinstance(tz, str):
        tz = pytz.timezone(tz)
    try:
        day = datetime.strptime(bday, "%Y-%m-%d")
    except (TypeError, ValueError) as e:
        raise ValueError(f"parsing baby birthday {bday!r}: {e}")
    return tz.localize(day)


def load_one_baby(conn: sqlite3.Connection, tz) -> BabyInfo:
    """Load the first baby recorded in the database.

    Args:
        conn (sqlite3.Connection): open database
        tz (str or tzinfo): zone the birthday is interpreted in

    Raises:
        LookupError: if no baby has been synced yet
        ValueError: if the birthday is malformed

    Returns:
        BabyInfo: with birthday at local midnight
    """
    df = pd.read_sql_query(
        "SELECT BabyID, FirstName, LastName, Birthday FROM Babies LIMIT 1", conn
    )
    if df.empty:
        raise LookupError("loading baby info: no babies in database; have you synced?")
    row = df.iloc[0]
    return BabyInfo(
        int(row["BabyID"]),
        row["FirstName"],
        row["LastName"],
        parse_birthday(row["Birthday"], tz),
    )


def load_sleep_segments(conn: sqlite3.Connection, baby_id: int) -> List[Tuple[int, int]]:
    """Load (start, end) unix timestamps of every finished sleep, by start.

    Sleeps still in progress have no end timestamp and are skipped.
    """
    df = pd.read_sql_query(
        """
        SELECT StartTimestamp, EndTimestamp FROM BabyData
        WHERE BabyID = ? AND Key = 'sleep' ORDER BY StartTimestamp
        """,
        conn,
        params=(baby_id,),
    )
    df = df.dropna(subset=["EndTimestamp"])
    return [
        (int(start), int(end))
        for start, end in zip(df["StartTimestamp"], df["EndTimestamp"])
    ]


def load_feed_segments(conn: sqlite3.Connection, baby_id: int) -> List[Tuple[int, int]]:
    """Load (start, end) unix timestamps of every feed, by start.

    Only the start timestamp and per-breast times are recorded, so the end
    is the start plus both breast times.
    """
    df = pd.read_sql_query(
        """
        SELECT StartTimestamp, BreastLeft, BreastRight FROM BabyFeedData
        WHERE BabyID = ? ORDER BY StartTimestamp
        """,
        conn,
        params=(baby_id,),
    )
    df[["BreastLeft", "BreastRight"]] = df[["BreastLeft", "BreastRight"]].fillna(0)
    ends = df["StartTimestamp"] + df["BreastLeft"] + df["BreastRight"]
    return [(int(start), int(end)) for start, end in zip(df["StartTimestamp"], ends)]
