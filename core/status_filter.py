from dataclasses import dataclass
from enum import Enum


class StatusFilter(Enum):
    ALL = ("all", "FILTER_ALL")
    ACTIVE = ("active", "FILTER_ACTIVE")
    COMPLETED = ("completed", "FILTER_COMPLETED")

    @property
    def token(self) -> str:
        return self.value[0]

    @property
    def label_key(self) -> str:
        return self.value[1]

    @classmethod
    def from_string(cls, value: str) -> "StatusFilter":
        token = (value or "").strip().lower()
        if not token:
            return cls.ALL
        for flt in cls:
            if flt.token == token:
                return flt
        raise ValueError(f"Invalid status filter: {value!r}")

    def accepts(self, completed: bool) -> bool:
        if self is StatusFilter.ACTIVE:
            return not completed
        if self is StatusFilter.COMPLETED:
            return completed
        return True


@dataclass(frozen=True)
class FilterCriteria:
    status_filter: StatusFilter = StatusFilter.ALL
    search_text: str = ""

    @property
    def searching(self) -> bool:
        return bool(self.search_text.strip())
