"""
Configuration file for the puzzle runner.

Contains both REAL and EXAMPLE parameter sets.
Modules should read values using the get_active_params() function.
"""

# ---------------------------------------------------------------
# MODE SELECTION
# ---------------------------------------------------------------

# Set to True to run against the small *.txt.example inputs
EXAMPLE_MODE = False


# ---------------------------------------------------------------
# I/O PATHS
# ---------------------------------------------------------------

INPUT_FOLDER = "static/inputs"
OUTPUT_FOLDER = "output"

SELECTED_DAYS = [1, 2, 3]


# ===============================================================
# REAL-MODE PARAMETERS
# ===============================================================

REAL = {
    "EXAMPLE_FILE": False,
    "SAVE_WIRE_MAP": True,
}


# ===============================================================
# EXAMPLE-MODE PARAMETERS
# ===============================================================

EXAMPLE = {
    "EXAMPLE_FILE": True,
    "SAVE_WIRE_MAP": False,
    # the example program has no room for the real noun and verb
    "PROGRAM_NOUN": 9,
    "PROGRAM_VERB": 10,
}


# ---------------------------------------------------------------
# SHARED PARAMETERS (used in both modes)
# ---------------------------------------------------------------

ORIGIN = (0, 0)

# Day two
PROGRAM_NOUN = 12
PROGRAM_VERB = 2
PROGRAM_TARGET = 19690720
PROGRAM_SEARCH_MAX = 99            # nouns and verbs searched in 0..=99


# ---------------------------------------------------------------
# VISUALIZATION
# ---------------------------------------------------------------

CANVAS_SIZE = 1024
CANVAS_MARGIN = 20
WIRE_THICKNESS = 1

WIRE_COLORS = [
    (255, 128, 0),    # first wire - blue
    (0, 200, 255),    # second wire - orange
]
COLOR_CROSSING = (255, 255, 255)   # crossings - white
COLOR_ORIGIN = (0, 255, 0)         # origin - green
COLOR_CLOSEST = (0, 0, 255)        # closest crossing - red


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params():
    """
    Returns the active set of parameters:
    - A combination of SHARED + mode-specific constants.
    - Used by solvers and the runner so they only import one dictionary.
    """

    base = {
        "INPUT_FOLDER": INPUT_FOLDER,
        "OUTPUT_FOLDER": OUTPUT_FOLDER,
        "ORIGIN": ORIGIN,
        "PROGRAM_NOUN": PROGRAM_NOUN,
        "PROGRAM_VERB": PROGRAM_VERB,
        "PROGRAM_TARGET": PROGRAM_TARGET,
        "PROGRAM_SEARCH_MAX": PROGRAM_SEARCH_MAX,
        "CANVAS_SIZE": CANVAS_SIZE,
        "CANVAS_MARGIN": CANVAS_MARGIN,
    }

    # Merge in real or example mode values
    if EXAMPLE_MODE:
        base.update(EXAMPLE)
    else:
        base.update(REAL)

    return base
