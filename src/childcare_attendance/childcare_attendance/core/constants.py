"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

STORAGE_KEY = "mt_demo_state_v1"

PLACEHOLDER = "—"
NOTE_SEPARATOR = " • "

CHILD_ID_PREFIX = "k_"

QUICK_IN = (
    "Dropped off by Mom",
    "Dropped off by Dad",
    "Grandma drop-off",
    "Late arrival",
    "Runny nose",
    "Needs diapers",
    "Needs wipes",
)
QUICK_OUT = (
    "Picked up by Mom",
    "Picked up by Dad",
    "Grandma pickup",
    "Early pickup",
    "Late pickup",
    "No nap",
    "Ate well",
    "Didn’t eat much",
)

# Roster used when no stored state exists yet.
DEFAULT_CHILDREN = (
    {"id": "k1", "firstName": "Hannah", "lastName": "C.", "isActive": True, "guardian": "Andrea", "allergies": ""},
    {"id": "k2", "firstName": "Morgan", "lastName": "C.", "isActive": True, "guardian": "Andrea", "allergies": "Peanuts"},
)
