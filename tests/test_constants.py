"""
Realistic test constants for the FoodCourt test suite.

Participants, badge emails and scan times modelled on a two-day conference.
"""

from datetime import datetime, timedelta, timezone

# =============================================================================
# PARTICIPANTS - Attendees as they appear on registration desk lists
# =============================================================================

REALISTIC_PARTICIPANTS = {
    "alice": {
        "display_name": "Alice",
        "email_prefix": "alice",
        "contact_phone": "555-0100",
    },
    "priya": {
        "display_name": "Priya Raman",
        "email_prefix": "priya.raman",
        "contact_phone": "+91 98450 12345",
    },
    "tomas": {
        "display_name": "Tomás Novák",
        "email_prefix": "tomas.novak",
        "contact_phone": "+420 601 234 567",
    },
    "kwame": {
        "display_name": "Kwame Mensah",
        "email_prefix": "kwame.mensah",
        "contact_phone": "+233 24 123 4567",
    },
}

# =============================================================================
# SCAN TIMES - When food court stations typically scan badges
# =============================================================================

EVENT_START = datetime(2025, 3, 14, 7, 0, tzinfo=timezone.utc)

SCAN_TIMES = {
    ("day1", "morningSnack"): EVENT_START + timedelta(hours=3, minutes=30),
    ("day1", "lunch"): EVENT_START + timedelta(hours=6),
    ("day1", "eveningSnack"): EVENT_START + timedelta(hours=9, minutes=15),
    ("day1", "dinner"): EVENT_START + timedelta(hours=13),
    ("day2", "morningSnack"): EVENT_START + timedelta(days=1, hours=3, minutes=30),
    ("day2", "lunch"): EVENT_START + timedelta(days=1, hours=6),
    ("day2", "eveningSnack"): EVENT_START + timedelta(days=1, hours=9, minutes=15),
}

# =============================================================================
# SCHEMA - Expected meal vocabulary
# =============================================================================

ALL_CELLS = list(SCAN_TIMES)

INVALID_CELLS = [
    ("day3", "lunch"),  # no third day
    ("day1", "brunch"),  # not a served slot
    ("day2", "dinner"),  # day 2 ends after the evening snack
    ("Day1", "lunch"),  # identifiers are case-sensitive
    ("", ""),
]

# =============================================================================
# ADMIN - Test credentials (low bcrypt cost keeps the suite fast)
# =============================================================================

ADMIN_USERNAME = "cscr"
ADMIN_PASSWORD = "cscr123$@"
TEST_BCRYPT_ROUNDS = 4
