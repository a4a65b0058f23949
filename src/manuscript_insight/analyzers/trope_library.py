"""Genre trope libraries: tropes with keywords, story beats with positions."""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class TropeSpec:
    name: str
    keywords: Tuple[str, ...]
    patterns: Tuple[str, ...]


@dataclass(frozen=True)
class BeatSpec:
    name: str
    position: str  # early | middle | late
    keywords: Tuple[str, ...]


@dataclass(frozen=True)
class GenreLibrary:
    tropes: Tuple[TropeSpec, ...]
    beats: Tuple[BeatSpec, ...]


def _t(name: str, keywords: str, patterns: str) -> TropeSpec:
    return TropeSpec(name, tuple(keywords.split("|")), tuple(patterns.split("|")))


def _b(name: str, position: str, keywords: str) -> BeatSpec:
    return BeatSpec(name, position, tuple(keywords.split("|")))


ROMANCE = GenreLibrary(
    tropes=(
        _t("Enemies to Lovers",
           "hate|rival|enemy|antagonist|despise|loathe|animosity|conflict|tension",
           "initial conflict|forced proximity|gradual attraction|turning point"),
        _t("Forced Proximity",
           "trapped|stuck|confined|forced|nowhere|escape|together|alone",
           "confined space|shared quarters|isolated location"),
        _t("Second Chance Romance",
           "ex|past|again|return|years|once|mistake|regret|reunion",
           "past relationship|separation|reunion|growth"),
        _t("Fake Relationship",
           "pretend|fake|act|charade|arrangement|contract|deal|agreement",
           "fake dating|marriage of convenience|developing real feelings"),
        _t("Love Triangle",
           "two|both|choice|torn|choose|competing|jealous|jealousy",
           "multiple suitors|difficult choice|emotional conflict"),
        _t("Forbidden Love",
           "forbidden|secret|hide|wrong|shouldn't|family|opposed|disapprove",
           "social barriers|family opposition|secret relationship"),
        _t("Grumpy x Sunshine",
           "grumpy|gruff|cheerful|optimist|pessimist|opposite|smile|brighten",
           "personality contrast|emotional thawing|opposites attract"),
        _t("Slow Burn",
           "slowly|gradual|time|patient|eventually|finally|realize|feelings",
           "prolonged tension|delayed gratification|emotional buildup"),
    ),
    beats=(
        _b("Meet Cute", "early", "meet|first|encounter|bump|unexpected"),
        _b("Initial Attraction", "early", "notice|drawn|attracted|beautiful|handsome"),
        _b("Conflict/Obstacle", "middle", "obstacle|problem|conflict|misunderstanding|fight"),
        _b("Dark Moment", "middle", "apart|break|leave|ending|over|goodbye"),
        _b("Grand Gesture", "late", "realize|gesture|prove|declaration|choose|sacrifice"),
        _b("Happily Ever After", "late", "together|forever|marry|commitment|future|always"),
    ),
)

THRILLER = GenreLibrary(
    tropes=(
        _t("Ticking Clock",
           "time|deadline|hours|minutes|running out|before|too late|countdown",
           "urgent deadline|race against time|mounting pressure"),
        _t("Red Herring",
           "suspect|misleading|distraction|wrong|seemed|thought|actually|turns out",
           "false clue|misdirection|revealed truth"),
        _t("Conspiracy Theory",
           "conspiracy|cover-up|government|organization|powerful|secret|corrupt|truth",
           "hidden agenda|web of lies|dangerous knowledge"),
        _t("Cat and Mouse",
           "chase|pursuit|hunter|prey|escape|catch|evade|track",
           "pursuit sequence|narrow escape|strategic moves"),
        _t("The Reveal",
           "reveal|twist|actually|truth|secret|discover|hidden|shocking",
           "major revelation|truth exposed|paradigm shift"),
        _t("Double Agent",
           "betray|traitor|spy|double|working for|secretly|loyal|trust",
           "hidden allegiance|betrayal|trust broken"),
        _t("Innocent Accused",
           "innocent|framed|wrongly|accused|didn't|prove|clear name|truth",
           "false accusation|fight for justice|proving innocence"),
    ),
    beats=(
        _b("Inciting Incident", "early", "attack|murder|threat|danger|crime|incident"),
        _b("Call to Action", "early", "investigate|pursue|hunt|find|stop|prevent"),
        _b("False Victory", "middle", "solved|caught|safe|over|relief|celebrate"),
        _b("Major Setback", "middle", "worse|wrong|trap|ambush|lose|fail"),
        _b("Final Confrontation", "late", "face|confront|showdown|final|end this|battle"),
        _b("Resolution", "late", "justice|caught|safe|peace|truth|exposed"),
    ),
)

FANTASY = GenreLibrary(
    tropes=(
        _t("Chosen One",
           "chosen|prophecy|destiny|special|only one|save|foretold|meant to",
           "prophetic selection|special powers|heroic destiny"),
        _t("Magic System",
           "magic|spell|enchant|power|mana|energy|cast|channel|ability",
           "magical abilities|power source|limitations and costs"),
        _t("Coming of Age",
           "young|learn|train|become|grow|discover|journey|transformation",
           "inexperienced hero|mentor relationship|personal growth"),
        _t("Quest",
           "quest|journey|search|find|artifact|retrieve|mission|travel",
           "long journey|companions|obstacles|goal"),
        _t("Dark Lord",
           "dark lord|evil|tyrant|ruler|dark|shadow|corrupt|malevolent",
           "powerful antagonist|evil empire|threatened world"),
        _t("Ancient Evil Awakens",
           "ancient|awaken|return|forgotten|sealed|dormant|rise again|slumber",
           "long-dormant threat|ancient power|resurgence"),
        _t("Mentor's Death",
           "mentor|teacher|master|die|death|sacrifice|loss|killed",
           "wise guide|hero alone|tragic loss"),
        _t("Hidden Heritage",
           "bloodline|ancestry|heritage|royal|descendant|lineage|secret|true identity",
           "noble birth|revealed identity|rightful heir"),
    ),
    beats=(
        _b("Ordinary World", "early", "normal|simple|peaceful|village|home|routine"),
        _b("Call to Adventure", "early", "summon|call|need|must|leave|journey"),
        _b("Crossing Threshold", "early", "leave|depart|beyond|enter|cross|new world"),
        _b("Trials and Tests", "middle", "challenge|test|trial|prove|overcome|struggle"),
        _b("Approach the Cave", "middle", "stronghold|fortress|lair|approach|prepare|final"),
        _b("Ordeal", "late", "battle|fight|confront|face|defeat|victory"),
        _b("Return with Prize", "late", "return|home|changed|victory|peace|restored"),
    ),
)

MYSTERY = GenreLibrary(
    tropes=(
        _t("Locked Room Mystery",
           "locked|sealed|impossible|closed|no way|inside|escape|entry",
           "impossible crime|sealed environment|clever solution"),
        _t("Detective with Flaw",
           "detective|investigator|flaw|quirk|obsessed|troubled|past|demons",
           "flawed protagonist|personal struggle|complexity"),
        _t("Hidden Clue",
           "clue|evidence|overlooked|missed|notice|detail|important|significant",
           "subtle hint|reader can solve|fair play"),
        _t("Unreliable Narrator",
           "remember|recall|confused|maybe|perhaps|thought|seemed|unclear",
           "questionable perspective|memory issues|truth revealed"),
        _t("Multiple Suspects",
           "suspect|motive|opportunity|means|could have|might be|each|all",
           "cast of suspects|competing theories|process of elimination"),
        _t("Dying Message",
           "dying|last words|final|before death|gasped|whispered|cryptic|clue",
           "cryptic message|victim's hint|decoded meaning"),
    ),
    beats=(
        _b("Crime Discovery", "early", "found|body|murder|crime|dead|discovered"),
        _b("Initial Investigation", "early", "examine|investigate|scene|evidence|witness|question"),
        _b("Gathering Suspects", "middle", "suspect|interview|alibi|motive|opportunity"),
        _b("False Solution", "middle", "arrest|solved|guilty|confession|caught"),
        _b("True Revelation", "late", "actually|real|truth|discover|reveal|expose"),
        _b("Denouement", "late", "explain|how|why|confession|evidence|proof"),
    ),
)

SCIFI = GenreLibrary(
    tropes=(
        _t("First Contact",
           "alien|extraterrestrial|first contact|species|encounter|communicate|unknown",
           "meeting aliens|communication challenges|cultural exchange"),
        _t("AI Uprising",
           "artificial intelligence|robot|machine|sentient|uprising|rebellion|control",
           "AI gains consciousness|human vs machine|existential threat"),
        _t("Time Paradox",
           "time|paradox|past|future|timeline|causality|loop|alternate",
           "time travel|consequences|butterfly effect"),
        _t("Dystopia",
           "dystopia|totalitarian|oppressive|control|surveillance|regime|government",
           "oppressive society|resistance|fight for freedom"),
        _t("Space Opera",
           "galaxy|empire|fleet|star|planet|space|ship|universe",
           "grand scale|multiple worlds|epic conflict"),
        _t("Cyberpunk",
           "cyber|hack|corporation|augment|implant|virtual|matrix|network",
           "high tech low life|corporate control|body modification"),
        _t("Post-Apocalyptic",
           "apocalypse|wasteland|survivor|ruins|collapse|destroyed|remnant",
           "world ended|survival|rebuilding"),
    ),
    beats=(
        _b("Technological Wonder", "early", "technology|advanced|innovation|discover|invention"),
        _b("Scientific Discovery", "early", "discover|breakthrough|science|research|experiment"),
        _b("Ethical Dilemma", "middle", "should|ethics|right|wrong|consequence|moral"),
        _b("System Failure", "middle", "malfunction|fail|error|corrupt|breach|crisis"),
        _b("Paradigm Shift", "late", "change|revolution|transform|new era|evolution"),
        _b("New Understanding", "late", "understand|realize|truth|meaning|purpose|future"),
    ),
)

HORROR = GenreLibrary(
    tropes=(
        _t("Jump Scare",
           "sudden|suddenly|burst|jumped|startled|scream|shock|appeared",
           "sudden appearance|tension release|shock moment"),
        _t("Haunted Location",
           "haunted|cursed|evil|house|place|atmosphere|presence|spirits",
           "sinister setting|dark history|trapped"),
        _t("The Monster",
           "creature|monster|beast|thing|entity|horror|inhuman|nightmare",
           "threatening entity|unknown nature|deadly danger"),
        _t("Unreliable Reality",
           "hallucination|imagined|real|sanity|insane|madness|dream|nightmare",
           "questioned reality|psychological horror|uncertain truth"),
        _t("Forbidden Knowledge",
           "forbidden|shouldn't know|curse|price|knowledge|discover|secret|truth",
           "dangerous information|cursed discovery|terrible cost"),
    ),
    beats=(
        _b("Ominous Setup", "early", "wrong|strange|unsettling|eerie|feeling|sense"),
        _b("First Encounter", "early", "see|glimpse|hear|sound|shadow|movement"),
        _b("Escalating Terror", "middle", "worse|more|again|closer|intense|fear"),
        _b("False Safety", "middle", "safe|relief|escape|away|over"),
        _b("Final Horror", "late", "face|confront|final|truth|reveal|ultimate"),
    ),
)

GENRE_LIBRARIES: Dict[str, GenreLibrary] = {
    "romance": ROMANCE,
    "thriller": THRILLER,
    "fantasy": FANTASY,
    "mystery": MYSTERY,
    "scifi": SCIFI,
    "horror": HORROR,
}


def get_library(genre: str) -> Optional[GenreLibrary]:
    """Library for a genre label (case-insensitive), or None."""
    return GENRE_LIBRARIES.get(genre.lower())
