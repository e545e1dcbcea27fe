import enum


class GuestType(str, enum.Enum):
    adult = "adult"
    child = "child"


class AggregationMethod(str, enum.Enum):
    ADD = "ADD"
    MAX = "MAX"
