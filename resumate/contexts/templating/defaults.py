"""
Default values shared by the template variants.

Provides:
- Placeholder and fixed labels
- Canonical section order
- Contact field icons
- Fallback accent color when neither caller nor preset supplies one
"""

import os

from dotenv import load_dotenv

load_dotenv()

NAME_PLACEHOLDER = "Your Name"
CURRENT_POSITION_LABEL = "Present"

# Summary -> Experience -> Projects -> Education -> Skills
SECTION_ORDER = ["summary", "experience", "project", "education", "skills"]

# Contact fields in header order
CONTACT_FIELDS = ["email", "phone", "location", "linkedin", "website"]

CONTACT_ICONS = {
    "email": "mail",
    "phone": "phone",
    "location": "map-pin",
    "linkedin": "linkedin",
    "website": "globe",
}

# Fields whose display text is the URL with its scheme stripped
LINK_FIELDS = {"linkedin", "website"}

DEFAULT_ACCENT_COLOR = os.getenv("DEFAULT_ACCENT_COLOR", "#3B82F6")
DEFAULT_TEMPLATE = os.getenv("DEFAULT_TEMPLATE", "classic")
