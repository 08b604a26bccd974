"""Keyword vocabularies used to classify section changes.

All terms are lowercase and matched as substrings of lowercased text.
"""

# Training flag cascade
FREQUENCY_TERMS = [
    "daily", "weekly", "monthly", "quarterly", "annually", "hourly",
    "every", "per day", "per week", "per month",
]
DOCUMENTATION_TERMS = ["document", "record", "log", "form", "report", "signature", "sign-off"]
SAFETY_TERMS = ["warning", "caution", "danger", "safety", "ppe", "protective", "hazard"]
LIMIT_TERMS = [
    "minimum", "maximum", "limit", "threshold", "range", "specification",
    "tolerance", "°c", "°f", "%", "mg", "ml",
]
ROLE_TERMS = ["responsible", "operator", "supervisor", "manager", "qa", "qc", "technician", "analyst"]

# Badges
BADGE_DOCUMENTATION_TERMS = DOCUMENTATION_TERMS + ["file", "attach"]
BADGE_ROLE_TERMS = ROLE_TERMS + ["personnel", "staff", "employee"]
BADGE_FREQUENCY_TERMS = FREQUENCY_TERMS + ["frequency", "interval"]
BADGE_PROCEDURE_TERMS = [
    "step", "procedure", "process", "method", "perform",
    "execute", "complete", "verify", "check", "ensure",
]

# Descriptors
DESCRIPTOR_FREQUENCY_TERMS = ["daily", "weekly", "monthly", "quarterly", "annually", "hourly"]
DESCRIPTOR_ROLE_TERMS = ["operator", "supervisor", "manager", "technician", "analyst", "qa", "qc"]
DESCRIPTOR_DOCUMENTATION_TERMS = ["document", "record", "log", "form", "report", "signature"]
DESCRIPTOR_SAFETY_TERMS = ["warning", "caution", "danger", "safety", "ppe", "hazard"]
DESCRIPTOR_LIMIT_TERMS = ["minimum", "maximum", "limit", "threshold", "range", "specification"]
