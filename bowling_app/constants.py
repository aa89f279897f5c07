MAX_FRAMES = 10
MAX_PINS = 10
FINAL_FRAME_INDEX = MAX_FRAMES - 1
DEFAULT_HIGH_SCORE_LIMIT = 5
