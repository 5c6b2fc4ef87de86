"""Shared application constants.

Centralizes the fixed vocabularies and threshold tables used by the
check-in, goal and milestone logic so they are documented in one place.
"""

# Milestone thresholds per milestone type. Fixed, not user-configurable.
# Order matters: milestones unlocked in one pass are emitted in this order.
MILESTONE_THRESHOLDS = {
    "days_clean": (1, 7, 30, 60, 90, 180, 365, 730),
    "meetings_attended": (1, 5, 10, 25, 50, 100),
    "check_ins_completed": (7, 30, 50, 100),
    "goals_achieved": (1, 3, 5, 10),
}

# Trigger tags offered on the daily check-in form
TRIGGER_OPTIONS = [
    "Stress", "Social Situations", "Work/School", "Family", "Money Worries",
    "Loneliness", "Boredom", "Anger", "Sadness", "Physical Pain",
    "Celebrations", "Peer Pressure", "Environment", "Routine Changes",
]

GOAL_CATEGORIES = [
    "Recovery", "Health & Wellness", "Relationships", "Career", "Education",
    "Financial", "Personal Growth", "Hobbies", "Service", "Spiritual",
]

# Score ranges (inclusive)
MOOD_RANGE = (1, 10)
ENERGY_RANGE = (1, 5)
SLEEP_RANGE = (1, 5)
PRIORITY_RANGE = (1, 5)

# Time ranges offered on the progress view, in days
PROGRESS_WINDOWS = (7, 30, 90)

# Number of triggers shown on the frequency chart
TOP_TRIGGER_LIMIT = 8

# Recent check-ins listed on the dashboard
DASHBOARD_RECENT_CHECKINS = 7

# Coping strategy library
STRATEGY_CATEGORIES = [
    "Breathing", "Grounding", "Movement", "Mindfulness", "Emergency",
    "Distraction", "Custom",
]

EFFECTIVENESS_RANGE = (1, 5)

# Built-in strategies every user starts with (category, title, description)
DEFAULT_COPING_STRATEGIES = [
    ("Breathing", "Box Breathing",
     "Breathe in for 4 counts, hold for 4, breathe out for 4, hold for 4. Repeat 4 times."),
    ("Breathing", "4-7-8 Breathing",
     "Inhale for 4 counts, hold for 7, exhale slowly for 8."),
    ("Grounding", "5-4-3-2-1 Senses",
     "Name 5 things you see, 4 you can touch, 3 you hear, 2 you smell and 1 you taste."),
    ("Grounding", "Cold Water",
     "Splash cold water on your face or hold an ice cube for a moment."),
    ("Movement", "Take a Walk",
     "Walk around the block or somewhere outside for at least 10 minutes."),
    ("Movement", "Stretching",
     "Slowly stretch your neck, shoulders, back and legs."),
    ("Mindfulness", "Urge Surfing",
     "Notice the craving like a wave: let it rise, peak and pass without acting on it."),
    ("Mindfulness", "Body Scan",
     "Move your attention slowly from head to toe and notice each sensation."),
    ("Emergency", "Call Your Sponsor",
     "Reach out to your sponsor or someone from your support network right away."),
    ("Emergency", "Go to a Meeting",
     "Find the nearest meeting, in person or online, and attend it."),
    ("Distraction", "Play the Tape Forward",
     "Think through what would really happen after using, all the way to the next morning."),
    ("Distraction", "Do Something With Your Hands",
     "Cook, clean, draw, build or play an instrument until the urge passes."),
]

# Emergency contacts
RELATIONSHIP_OPTIONS = [
    "Sponsor", "Therapist", "Family Member", "Friend", "Support Group Leader",
    "Crisis Hotline", "Doctor", "Emergency Services", "Mentor", "Other",
]

CONTACT_PRIORITY_LABELS = {
    1: "Critical",
    2: "High",
    3: "Medium",
    4: "Low",
    5: "Reference",
}

# Phone numbers need at least this many digits to be dialled
MIN_PHONE_DIGITS = 10

CRISIS_HOTLINES = [
    {"name": "National Suicide Prevention Lifeline", "number": "988",
     "description": "24/7 crisis support"},
    {"name": "Crisis Text Line", "number": "Text HOME to 741741",
     "description": "Text-based crisis support"},
    {"name": "SAMHSA National Helpline", "number": "1-800-662-4357",
     "description": "Substance abuse support"},
    {"name": "Emergency Services", "number": "911",
     "description": "Life-threatening emergencies"},
]

# Profile preferences stored with each recovery profile
DEFAULT_PRIVACY_SETTINGS = {
    "anonymous": False,
    "share_progress": False,
    "data_analytics": True,
}

DEFAULT_NOTIFICATION_PREFERENCES = {
    "daily_reminder": True,
    "milestone_alerts": True,
    "weekly_summary": True,
    "crisis_check_ins": True,
    "reminder_time": "09:00",
}
