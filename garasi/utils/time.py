from datetime import date, datetime
import pytz

WIB = pytz.timezone("Asia/Jakarta")


def now_wib() -> datetime:
    return datetime.now(WIB)


def today_wib() -> date:
    return now_wib().date()
