from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class StatCard:
    label: str
    value: str
    trend: Optional[str] = None


def greeting(hour: int) -> str:
    if hour < 12:
        return "Good morning"
    if hour < 18:
        return "Good afternoon"
    return "Good evening"


def dashboard_stats(sample_data: bool) -> List[StatCard]:
    if sample_data:
        return [
            StatCard("Posts Created", "24", "+12%"),
            StatCard("Scheduled Posts", "8", "+3"),
            StatCard("Avg Engagement", "5.4%", "+0.8%"),
            StatCard("Total Followers", "11.2K", "+340"),
        ]
    return [
        StatCard("Posts Created", "0"),
        StatCard("Scheduled Posts", "0"),
        StatCard("Avg Engagement", "--"),
        StatCard("Total Followers", "--"),
    ]
