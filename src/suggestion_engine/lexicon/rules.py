"""Fixed rule tables consulted by the detectors."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

MISSPELLINGS: Mapping[str, str] = MappingProxyType(
    {
        "teh": "the",
        "recieve": "receive",
        "receving": "receiving",
        "seperate": "separate",
        "definately": "definitely",
        "difinitely": "definitely",
        "occured": "occurred",
        "occurence": "occurrence",
        "accomodate": "accommodate",
        "neccessary": "necessary",
        "embarass": "embarrass",
        "alot": "a lot",
        "untill": "until",
        "begining": "beginning",
        "wierd": "weird",
        "freind": "friend",
        "calender": "calendar",
        "goverment": "government",
        "rember": "remember",
        "shedule": "schedule",
        "beleive": "believe",
        "sucess": "success",
        "buisness": "business",
        "occassion": "occasion",
        "reccomend": "recommend",
        "recomend": "recommend",
        "adress": "address",
        "aparent": "apparent",
        "comming": "coming",
        "excersise": "exercise",
        "fourty": "forty",
        "gratefull": "grateful",
        "happend": "happened",
        "intrested": "interested",
        "libary": "library",
        "posible": "possible",
        "tommorow": "tomorrow",
        "diffrent": "different",
        "diferent": "different",
        "perfact": "perfect",
        "excelent": "excellent",
        "beatiful": "beautiful",
        "importent": "important",
        "indipendent": "independent",
        "independant": "independent",
        "becuase": "because",
        "writeing": "writing",
        "writting": "writing",
        "makeing": "making",
        "comeing": "coming",
        "liveing": "living",
        "haveing": "having",
        "giveing": "giving",
        "takeing": "taking",
        "useing": "using",
        "loveing": "loving",
        "moveing": "moving",
        "pacakge": "package",
        "langauge": "language",
        "knowlege": "knowledge",
        "priviledge": "privilege",
        "maintainance": "maintenance",
        "refference": "reference",
        "existance": "existence",
        "persistant": "persistent",
        "resistence": "resistance",
        "appearence": "appearance",
        "experiance": "experience",
        "performence": "performance",
        "developement": "development",
        "enviroment": "environment",
        "managment": "management",
        "arguement": "argument",
        "mispell": "misspell",
        "visable": "visible",
        "wether": "whether",
        "upto": "up to",
        "incase": "in case",
        "alittle": "a little",
        "thankyou": "thank you",
        "goodluck": "good luck",
        "anyways": "anyway",
        "irregardless": "regardless",
        "supposably": "supposedly",
        "gammer": "grammar",
        "plese": "please",
    }
)

# Phrase -> (replacement, confidence). Lower confidence marks context-dependent
# phrases that are sometimes correct.
GRAMMAR_PATTERNS: Mapping[str, Tuple[str, float]] = MappingProxyType(
    {
        "could of": ("could have", 0.92),
        "would of": ("would have", 0.92),
        "should of": ("should have", 0.92),
        "might of": ("might have", 0.9),
        "must of": ("must have", 0.9),
        "your welcome": ("you're welcome", 0.9),
        "its okay": ("it's okay", 0.85),
        "who's book": ("whose book", 0.9),
        "there going": ("they're going", 0.85),
        "there house": ("their house", 0.85),
        "to much": ("too much", 0.88),
        "to many": ("too many", 0.88),
        "loose weight": ("lose weight", 0.9),
        "i is": ("I am", 0.9),
        "i are": ("I am", 0.9),
        "he are": ("he is", 0.88),
        "she are": ("she is", 0.88),
        "it are": ("it is", 0.85),
        "they is": ("they are", 0.88),
        "we is": ("we are", 0.88),
        "you is": ("you are", 0.88),
        "i has": ("I have", 0.88),
        "he have": ("he has", 0.85),
        "she have": ("she has", 0.85),
        "i am go": ("I am going", 0.85),
    }
)

NEGATIONS: Tuple[str, ...] = (
    "don't", "doesn't", "didn't", "won't", "wouldn't", "can't", "couldn't",
    "shouldn't", "isn't", "aren't", "wasn't", "weren't", "dont", "doesnt",
    "didnt", "cant", "wont",
)
NEGATIVE_OBJECTS: Tuple[str, ...] = (
    "no", "nothing", "nobody", "nowhere", "never", "none",
)
AUXILIARY_VERBS: Tuple[str, ...] = (
    "is", "are", "was", "were", "will", "would", "can", "could", "should",
    "may", "might", "must", "do", "does", "did", "have", "has", "had",
)

# Words starting with a vowel letter that take "a", and consonant-letter words
# that take "an".
A_BEFORE_VOWEL_LETTER = frozenset(
    """
    one once unicorn uniform union unique unit united universe universal
    university usage use used useful useless user usual usually utility euro
    european eulogy ewe ufo
    """.split()
)
AN_BEFORE_CONSONANT_LETTER = frozenset(
    """
    hour hours hourly honest honestly honor honour honorable heir herb
    """.split()
)

REGISTER_WORDS: Mapping[str, Tuple[str, Tuple[str, ...]]] = MappingProxyType(
    {
        "shiat": ("shoot", ("darn", "oh no", "goodness")),
        "pee": ("urinate", ("use the restroom", "take a bathroom break")),
        "poo": ("defecate", ("use the bathroom", "use the restroom")),
        "crap": ("nonsense", ("poor quality", "rubbish", "bad")),
        "stupid": ("unwise", ("poor", "ineffective", "misguided")),
        "dumb": ("unwise", ("poor", "ineffective", "illogical")),
        "skibidi": ("silly", ("playful", "fun", "energetic")),
    }
)

INFORMAL_WORDS: Mapping[str, str] = MappingProxyType(
    {
        "gonna": "going to",
        "wanna": "want to",
        "gotta": "have to",
        "kinda": "somewhat",
        "sorta": "somewhat",
        "ya": "you",
        "dunno": "do not know",
    }
)

GREETINGS: Tuple[str, ...] = ("hello", "hi", "hey", "greetings", "thanks")

PHONETIC_SUBSTITUTIONS: Tuple[Tuple[str, str], ...] = (
    ("ie", "ei"),
    ("ei", "ie"),
    ("ph", "f"),
    ("f", "ph"),
    ("c", "k"),
    ("k", "c"),
    ("s", "z"),
    ("z", "s"),
)
