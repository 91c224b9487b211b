from enum import Enum, auto


class Topics(Enum):
    NEW_DEFINITION = auto()

    CONFIGURATION_GENERATED = auto()
    GENERATION_REJECTED = auto()
