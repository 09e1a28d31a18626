"""Game tunables shared across the core and UI layers."""

ROUND_TIME_SECONDS: int = 15
LOW_TIME_WARNING_SECONDS: int = 5
FEEDBACK_DELAY_SECONDS: float = 1.5

MAX_ANSWER_LENGTH: int = 4
TILE_POOL_SIZE: int = 10
HINTS_PER_GAME: int = 3

MIN_ITEM_COUNT: int = 3
MAX_ITEM_COUNT: int = 30
DEFAULT_ITEM_COUNT: int = 10

# Ceilings at or below this value only use addition and subtraction.
EASY_OPERATORS_CEILING: int = 10

DIFFICULTY_EASY: int = 10
DIFFICULTY_MEDIUM: int = 50
DIFFICULTY_HARD: int = 100

DIFFICULTY_PRESETS: tuple[tuple[str, int], ...] = (
    ("EASY (0-10, + / -)", DIFFICULTY_EASY),
    ("MEDIUM (0-50, All Ops)", DIFFICULTY_MEDIUM),
    ("HARD (0-100, All Ops)", DIFFICULTY_HARD),
)
