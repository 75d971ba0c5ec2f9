"""Fixed word and sentence tables shared by the generation techniques.

Everything here is immutable and safe to read from concurrent generations.
Templates use ``str.format`` slots: ``{A}``/``{B}`` are cleaned titles,
``{nounA}``/``{nounB}`` nouns taken from each description, ``{verbA}``/``{verbB}``
verbs and ``{abstract}`` an abstract noun.
"""

DEFAULT_NOUN_A = "stone"
DEFAULT_NOUN_B = "echo"

TEMPLATES = (
    "The {nounA} of {A} {verbA} toward {B}.",
    "Beneath {A}, something {verbA} the {nounB}.",
    "{A} remembers what {B} has forgotten.",
    "The {nounA} {verbA} while {B} {verbB} in {abstract}.",
    "Where {A} ends, the {nounB} of {B} begins to {verbB}.",
    "A {abstract} drifts between {A} and {B}.",
    "Nobody told {B} that the {nounA} still {verbA}.",
    "The {nounA} remembers {nounB}.",
    "{A} and {B} share one {abstract}, and it {verbA}.",
    "Listen: the {nounB} {verbB} under {A}.",
    "Every {nounA} near {A} {verbA} of {abstract}.",
    "The air above {B} tastes of {nounA} and {abstract}.",
    "{B} is only the shadow that {A} {verbA}.",
    "Somewhere a {nounA} {verbA}, and {B} answers.",
    "The {abstract} of {A} has folded into the {nounB}.",
    "Count the {nounA}s of {A}; one of them {verbB}.",
    "{A} {verbA} in a voice borrowed from {B}.",
    "The {nounB} of {B} was never meant to {verbA}.",
    "Between the {nounA} and the {nounB}, {abstract} waits.",
    "In {abstract}, {A} becomes {B}.",
    "The map forgets {A}; the {nounA} does not.",
    "At the edge of {B}, the {nounB} {verbB} backward.",
    "{A} hums with the {abstract} of a buried {nounA}.",
    "What {verbA} in {A} will {verbB} in {B}.",
    "The {nounA} and the {nounB} exchange names in the dark.",
    "Here, {abstract} is measured in {nounA}s.",
    "A thread of {abstract} ties {A} to the {nounB}.",
    "{B} still {verbB} for the {nounA} it lost.",
    "The last {nounA} of {A} {verbA} into {abstract}.",
    "Something under {B} {verbB} the shape of a {nounA}.",
)

VERBS = (
    "whispers",
    "dissolves",
    "hums",
    "remembers",
    "unravels",
    "drifts",
    "sleeps",
    "bleeds",
    "listens",
    "folds",
    "waits",
    "murmurs",
    "fractures",
    "dreams",
    "rusts",
    "flickers",
    "sinks",
    "calls",
)

ABSTRACTS = (
    "silence",
    "static",
    "memory",
    "absence",
    "longing",
    "entropy",
    "the void",
    "forgetting",
    "distance",
    "dusk",
    "a lost frequency",
    "erosion",
    "the hour between",
    "residue",
)

BRIDGE_PHRASES = (
    "{a} bleeds into {b}",
    "{a}, which is almost {b}",
    "between {a} and {b} a frequency hums",
    "{a} echoes as {b}",
    "the {a} folds until it becomes {b}",
    "{a} and {b} rhyme in the static",
)

CUTUP_SEPARATOR = " — "
SKIPGRAM_SUFFIX = "..."

NO_SIGNAL_WHISPER = "The signal is too weak. The void is silent."
SINGLE_SUBJECT_WHISPER = "Only {title} answers, and it answers alone."
FALLBACK_WHISPER = "{a} and {b} flicker in the static between them."
