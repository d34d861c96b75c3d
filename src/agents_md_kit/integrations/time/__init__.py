from agents_md_kit.integrations.time.abc import Time
from agents_md_kit.integrations.time.fake import FakeTime
from agents_md_kit.integrations.time.real import RealTime

__all__ = [
    "FakeTime",
    "RealTime",
    "Time",
]
