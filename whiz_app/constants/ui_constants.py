"""Qt UI constants and player-facing messages."""

WINDOW_TITLE: str = "Math Whiz Challenge"
WINDOW_MIN_WIDTH: int = 450
WINDOW_MIN_HEIGHT: int = 650

WELCOME_TITLE: str = "MATH WHIZ CHALLENGE"
WELCOME_START_BUTTON: str = "START CHALLENGE"

MODE_TITLE: str = "Select Game Mode"
MODE_ITEM_COUNT_LABEL: str = "Number of Problems (3-30):"
MODE_QUIT_BUTTON: str = "QUIT GAME"
MODE_HELP_BUTTON: str = "HOW TO PLAY"

GAME_CANCEL_BUTTON: str = "X CANCEL"
GAME_RESET_BUTTON: str = "RESET"
GAME_SUBMIT_BUTTON: str = "SUBMIT"
GAME_HINT_BUTTON_TEMPLATE: str = "HINT ({count})"
GAME_SHUFFLE_BUTTON: str = "SHUFFLE"
GAME_ITEM_TEMPLATE: str = "Item {current} / {total}"
GAME_TIMER_TEMPLATE: str = "Time: {seconds}s"

RESULTS_PLAY_AGAIN_BUTTON: str = "PLAY AGAIN"
RESULTS_EXIT_BUTTON: str = "EXIT GAME"

MSG_BUILD_ANSWER: str = "Click the tiles to build the answer."
MSG_KEEP_BUILDING: str = "Keep building the number."
MSG_MAX_LENGTH: str = "Answer is 4 digits max. Press SUBMIT or RESET."
MSG_TILE_UNAVAILABLE: str = "That tile has already been used."
MSG_TILES_RESET: str = "Puzzle tiles have been reset."
MSG_EMPTY_ANSWER: str = "Place digits to form an answer."
MSG_UNREADABLE_ANSWER: str = "Error reading input. Press RESET and try again."
MSG_CORRECT_TEMPLATE: str = "Correct! +{points} points!"
MSG_INCORRECT_TEMPLATE: str = "Incorrect. Correct Answer: {answer}"
MSG_TIMED_OUT_TEMPLATE: str = "Time's up! The correct answer was: {answer}"
MSG_NO_HINTS: str = "No hints remaining! You're on your own, Whiz!"
MSG_HINT_USED_TEMPLATE: str = "Hint used! {count} remaining."
MSG_HINT_NOT_APPLIED: str = "Hint could not be applied."
MSG_SHUFFLED: str = "Tiles shuffled!"

CONFIRM_CANCEL_TITLE: str = "Cancel Game"
CONFIRM_CANCEL_TEXT: str = "Leave this game? Your progress will be lost."
