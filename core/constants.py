"""
Trainer Constants

Mode tags and round parameters shared by the session engine.
"""

from enum import Enum


# ---- Modes ----

class Mode(str, Enum):
    """Exercise mode selected in the controller."""
    TYPING = "typing"
    CONJUGATION = "conjugation"


# ---- Typing Drill ----

ROUND_SIZE = 10              # Words per typing round
TICK_INTERVAL_SECONDS = 0.1  # Live timer refresh period


# ---- Session States ----

class SessionState(str, Enum):
    """Lifecycle states shared by both session types."""
    IDLE = "idle"
    RUNNING = "running"      # typing: words left to type
    FINISHED = "finished"    # typing: last word accepted
    ACTIVE = "active"        # conjugation: grid shown, not graded
    GRADED = "graded"        # conjugation: answers checked


# ---- Typing Submit Outcomes ----

class SubmitOutcome(str, Enum):
    ADVANCED = "advanced"
    FINISHED = "finished"
    NO_MATCH = "no_match"
    IGNORED = "ignored"      # submitted while no round is running
