"""Static metadata describing WhizQt."""

APP_NAME = "WhizQt"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "WhizQt is a timed arithmetic challenge. Build each answer from the shuffled "
    "digit tiles before the countdown runs out, and keep a streak going for bonus points."
)

HELP_TEXT = (
    "Pick a difficulty and how many problems to play (3-30).\n\n"
    "Tap the digit tiles to build your answer, then press SUBMIT. "
    "Each problem has a 15 second limit.\n\n"
    "RESET clears your answer, SHUFFLE reorders the unused tiles and HINT "
    "reveals the next digit (3 hints per game).\n\n"
    "Consecutive correct answers build a streak: each correct answer is worth "
    "as many points as your streak so far, with a minimum of 1."
)
