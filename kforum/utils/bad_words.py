# kforum/utils/bad_words.py
# Curated lists for the local lexical filter. Loaded once at import; treat as read-only.
import re
from typing import FrozenSet, Tuple

# ---------------------------
# Denylist
# ---------------------------
BAD_WORDS: FrozenSet[str] = frozenset({
    # Hindi / Hinglish - explicit
    "madharchod", "madarchod", "madarjaat", "bhenchod", "behenchod", "bhen ke lode", "bhenkelode",
    "chutiya", "chootiya", "chutiye", "chut", "choot", "lavda", "lauda", "lund",
    "bhosdike", "bhosadike", "bhosdiwale", "randi", "randwa", "saala", "saale", "harami", "haramkhor",
    "kamine", "kamina", "bhadwe", "bhadwa", "gand", "gaand", "gandu", "jhaatu", "jhaat", "tatte",
    "chodu", "chodna", "chod", "gaandmara", "gaand mara",
    # Hindi - abbreviations (token match only, too short for substring search)
    "mc", "bc", "mkc", "bkl", "mka", "tmkc", "bsdk", "bkc", "mkb", "bkb", "lkb",
    # Hindi - phrases
    "teri maa ki", "behen ka", "maa chod", "bhen chod", "teri behen", "tera baap",
    "maa ka bhosda", "behen ka loda", "gand mara", "lund choos", "chut ka",
    # English - explicit
    "fuck", "fucking", "fucker", "shit", "bitch", "asshole", "bastard", "dick", "pussy",
    "whore", "slut", "cunt", "nigger", "faggot", "motherfucker", "cocksucker", "bullshit",
    "fuckhead", "dipshit", "jackass", "cock", "penis", "vagina",
    # Insults
    "stupid", "idiot", "dumb", "useless", "trash", "garbage", "loser", "moron", "retard", "pathetic",
    "horrible", "disgusting", "pagal", "bewakoof", "gadha", "ullu",
})

# Ordinary words that embed a short denylist term. Tokens listed here are left out of
# the no-space compound string, so "parachute" or "closer" never trip substring matching.
SAFE_WORDS: FrozenSet[str] = frozenset({
    "parachute", "parachutes", "chutney",
    "propaganda", "uganda", "gandhi", "gandalf",
    "peacock", "peacocks", "cockpit", "cockpits", "cocktail", "cocktails", "cockroach",
    "cockroaches", "hancock", "shuttlecock", "cockatoo",
    "dickens", "dickinson", "dickson",
    "scunthorpe",
    "closer", "closers",
    "oxymoron", "retardant",
    "dumbbell", "dumbbells",
    "pullup", "pullups",
    "tattered",
    "brandish", "brandished", "brandishing", "randint",
    "laudable",
    "shiitake",
})

# ---------------------------
# Harassment phrases (never echoed back as flagged words)
# ---------------------------
_INSULT = r"(stupid|useless|trash|garbage|dumb|idiot|pathetic|horrible|worthless|loser|nothing)"

HARASSMENT_PATTERNS: Tuple[re.Pattern, ...] = tuple(
    re.compile(p, re.IGNORECASE)
    for p in [
        rf"you\s+(are|r|re)\s+(so\s+|such\s+an?\s+|a\s+|an\s+)?{_INSULT}",
        rf"you'?re\s+(so\s+|such\s+an?\s+|a\s+|an\s+)?{_INSULT}",
        r"nobody\s+(likes|wants|cares\s+about)\s+you",
        r"just\s+(leave|go\s+away|die)",
        r"you('ll|\s+will)\s+regret",
        r"people\s+like\s+you",
        r"go\s+away",
        r"you\s+ruin",
        r"hate\s+you",
        r"kill\s+(you|yourself)",
        r"\bkys\b",
        r"shut\s+(up|the\s+fuck)",
        r"you\s+suck",
        r"get\s+lost",
        r"drop\s+dead",
        # Hinglish
        r"\btu\s+(bilkul|bahut)\s+(pagal|bewakoof|gadha|kamina|bekaar|ghatiya)\s+hai",
        r"\btum\s+(pagal|bewakoof|gadhe|kamine|bekaar|ghatiya)\s+ho",
        r"bhen\s*k[ei]\s*lod[ea]",
        r"maa\s*k[ei]\s*(lod[ea]|chut|bhosda)",
        r"teri\s*(maa|behen|behan)",
        r"ter[ai]\s*baap",
        r"gand\s*mar",
        r"lund\s*choos",
        r"chut\s*(k[ei]|mara)",
    ]
)
