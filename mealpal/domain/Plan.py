"""Plan domain entity: recipes scheduled for the days of one ISO week."""
from datetime import date, timedelta
from typing import Dict, List

DAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


class Plan:
    def __init__(self, week_number: int, year: int, meals: Dict[str, List[str]]):
        self.week_number = week_number
        self.year = year
        self.meals = meals
        self.week = week_number  # stored also as 'week' for serialisers

    def monday(self) -> date:
        return date.fromisocalendar(self.year, self.week_number, 1)

    def to_dict(self):
        monday = self.monday()
        return {
            "week": self.week_number,
            "year": self.year,
            "days": [
                {
                    "day": name,
                    "date": (monday + timedelta(days=i)).isoformat(),
                    "recipes": list(self.meals.get(name, [])),
                }
                for i, name in enumerate(DAYS)
            ],
        }
