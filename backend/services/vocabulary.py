"""Keyword tables used by the posting extractors.

Kept as plain data so lists can grow without touching the matching code.
"""

import re

# ---------------------------------------------------------------------------
# Job titles
# ---------------------------------------------------------------------------

# A candidate title must mention at least one of these
TITLE_KEYWORDS: tuple[str, ...] = (
    "manager", "developer", "analyst", "specialist", "engineer", "director",
    "coordinator", "assistant", "executive", "consultant", "lead", "senior",
    "junior", "intern",
)

# Candidates equal to one of these are never titles
GENERIC_TITLE_PHRASES: frozenset[str] = frozenset({
    "we're", "looking", "hiring", "join", "team", "company", "opportunity",
})

# Leading filler stripped from title candidates
TITLE_LEAD_FILLERS: tuple[str, ...] = (
    "we're hiring", "we are hiring", "we're looking for", "we are looking for",
    "hiring", "looking for", "seeking", "position", "role", "vacancy",
)

# Words that precede "hiring" without naming a company
COMPANY_STOPWORDS: frozenset[str] = frozenset({
    "we", "we're", "now", "currently", "actively", "urgently", "is", "are",
    "immediate", "immediately",
})

# Decorations people put around titles in social-media style posts
TITLE_NOISE_GLYPHS = "🚀📍🏢🕓🧑‍💼✅❗📩📧🎯🔑💰🔥⭐#"

# ---------------------------------------------------------------------------
# Locations
# ---------------------------------------------------------------------------

KNOWN_CITIES: tuple[str, ...] = (
    "hyderabad", "bangalore", "bengaluru", "chennai", "mumbai", "delhi",
    "new delhi", "pune", "kolkata", "ahmedabad", "jaipur", "lucknow",
    "kanpur", "nagpur", "indore", "thane", "bhopal", "visakhapatnam",
    "pimpri", "patna", "vadodara", "ghaziabad", "ludhiana", "agra",
    "nashik", "faridabad", "meerut", "rajkot", "kalyan", "vasai",
    "varanasi", "srinagar", "aurangabad", "dhanbad", "amritsar",
    "navi mumbai", "allahabad", "ranchi", "gwalior", "jabalpur",
    "coimbatore", "vijayawada", "jodhpur", "madurai", "raipur", "kota",
    "guwahati", "chandigarh", "solapur", "hubli", "tiruchirappalli",
    "bareilly", "mysore", "tiruppur", "gurgaon", "gurugram", "aligarh",
    "jalandhar", "bhubaneswar", "salem", "mira bhayandar", "warangal",
    "thiruvananthapuram", "guntur", "bhiwandi", "saharanpur", "gorakhpur",
    "bikaner", "amravati", "noida", "jamshedpur", "bhilai", "cuttack",
    "firozabad", "kochi", "nellore", "bhavnagar", "dehradun", "durgapur",
    "asansol", "rourkela", "nanded", "kolhapur", "ajmer", "akola",
    "gulbarga", "jamnagar", "ujjain", "loni", "siliguri", "jhansi",
    "ulhasnagar", "jammu", "sangli miraj kupwad", "mangalore", "erode",
    "belgaum", "ambattur", "tirunelveli", "malegaon", "gaya", "jalgaon",
    "udaipur", "maheshtala",
)

# ---------------------------------------------------------------------------
# Work arrangement and job type (regex fragments, checked in order)
# ---------------------------------------------------------------------------

REMOTE_KEYWORDS: tuple[str, ...] = (
    r"remote", r"work from home", r"wfh", r"hybrid", r"telecommut",
)
OFFICE_KEYWORDS: tuple[str, ...] = (
    r"work from office", r"office", r"on-site", r"onsite",
)

JOB_TYPE_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("contract", (r"contract[-\s]to[-\s]hire", r"contract(?:or|ual)?s?", r"c2h")),
    ("part_time", (r"part[-\s]?time",)),
    ("internship", (r"internships?", r"interns?", r"trainees?")),
)

# ---------------------------------------------------------------------------
# Departments, matched against the extracted title (regex fragments)
# ---------------------------------------------------------------------------

DEPARTMENT_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Human Resources", (r"talent", r"recruit", r"hr\b", r"human resources")),
    ("Engineering", (
        r"developer", r"engineer", r"tech", r"software", r"frontend",
        r"backend", r"full[-\s]?stack",
    )),
    ("Sales", (r"sales", r"business development")),
    ("Marketing", (r"marketing", r"digital marketing")),
    ("Finance", (r"financ", r"accounting", r"accountant")),
    ("Operations", (r"operations", r"ops\b")),
    ("Customer Support", (r"support", r"customer")),
    ("Design", (r"design", r"ui\b", r"ux\b")),
)

# ---------------------------------------------------------------------------
# Skills, grouped in the order they are reported
# ---------------------------------------------------------------------------

TECH_SKILLS: tuple[str, ...] = (
    "javascript", "js", "typescript", "ts", "react", "angular", "vue",
    "node.js", "nodejs", "python", "java", "php", ".net", "c#", "sql",
    "mongodb", "mysql", "postgresql", "aws", "azure", "docker", "kubernetes",
)

SOFT_SKILLS: tuple[str, ...] = (
    "communication", "leadership", "teamwork", "problem solving",
    "problem-solving", "analytical", "organizational",
)

DOMAIN_SKILLS: tuple[str, ...] = (
    "recruitment", "hiring", "sourcing", "it recruitment", "domestic",
    "contract hiring",
)

SKILL_GROUPS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("technical", TECH_SKILLS),
    ("soft", SOFT_SKILLS),
    ("domain", DOMAIN_SKILLS),
)

# ---------------------------------------------------------------------------
# Section headings
# ---------------------------------------------------------------------------

REQUIREMENT_SECTION_KEYWORDS: tuple[str, ...] = (
    r"requirements?", r"qualifications?", r"skills?", r"must have",
    r"should have", r"experience", r"expertise",
)
RESPONSIBILITY_SECTION_KEYWORDS: tuple[str, ...] = (
    r"responsibilities", r"duties", r"key responsibilities",
    r"what you'll do", r"role", r"tasks",
)

# Keywords whose bullet run is taken when no matching section exists
REQUIREMENT_RUN_KEYWORDS: tuple[str, ...] = (r"requirements?", r"qualifications?")
RESPONSIBILITY_RUN_KEYWORDS: tuple[str, ...] = (r"responsibilities", r"duties")
BENEFIT_RUN_KEYWORDS: tuple[str, ...] = (r"benefits", r"perks", r"what we offer")

DESCRIPTION_START_MARKERS: tuple[str, ...] = (
    "passionate", "opportunity", "join", "looking for",
)
DESCRIPTION_END_MARKERS: tuple[str, ...] = (
    "key responsibilities", "requirements", "qualifications",
)

BULLET_MARKERS = "•✅▪-"


def alternation(fragments: tuple[str, ...]) -> str:
    """Join regex fragments into one non-capturing alternation."""
    return "(?:" + "|".join(fragments) + ")"


def literal_alternation(words: tuple[str, ...]) -> str:
    """Alternation of literal words, longest first so phrases win over parts."""
    ordered = sorted(set(words), key=len, reverse=True)
    return "(?:" + "|".join(re.escape(w) for w in ordered) + ")"
