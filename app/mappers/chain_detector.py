"""Chain, cuisine and franchise detection for business names.

Both keyword lists are priority lists: they are scanned in declaration order
and the first substring hit wins, so classification is reproducible for names
that contain more than one keyword.
"""

import re

from app.schemas.leads import ClassificationResult

KNOWN_CHAINS: tuple[str, ...] = (
    # Fast food
    "mcdonald's",
    "mcdonalds",
    "burger king",
    "wendy's",
    "wendys",
    "taco bell",
    "kfc",
    "kentucky fried chicken",
    "chick-fil-a",
    "chickfila",
    "popeyes",
    "arby's",
    "arbys",
    "sonic",
    "jack in the box",
    "carl's jr",
    "carls jr",
    "hardee's",
    "hardees",
    "whataburger",
    "in-n-out",
    "in n out",
    "five guys",
    "shake shack",
    "white castle",
    # Pizza chains
    "domino's",
    "dominos",
    "pizza hut",
    "papa john's",
    "papa johns",
    "little caesars",
    "papa murphy's",
    "papa murphys",
    "marco's pizza",
    "marcos pizza",
    "hungry howie's",
    # Fast casual
    "chipotle",
    "panera",
    "panera bread",
    "qdoba",
    "moe's",
    "moes",
    "panda express",
    "noodles & company",
    "noodles and company",
    "firehouse subs",
    "jersey mike's",
    "jersey mikes",
    "jimmy john's",
    "jimmy johns",
    "subway",
    "quiznos",
    "potbelly",
    "jason's deli",
    "jasons deli",
    "mcalister's",
    "mcalisters",
    "newk's",
    "newks",
    "zaxby's",
    "zaxbys",
    "wingstop",
    "buffalo wild wings",
    "hooters",
    # Casual dining
    "applebee's",
    "applebees",
    "chili's",
    "chilis",
    "olive garden",
    "red lobster",
    "outback steakhouse",
    "outback",
    "longhorn steakhouse",
    "texas roadhouse",
    "cracker barrel",
    "denny's",
    "dennys",
    "ihop",
    "waffle house",
    "perkins",
    "bob evans",
    "golden corral",
    "ruby tuesday",
    "tgi friday's",
    "tgi fridays",
    "red robin",
    "cheesecake factory",
    "bj's restaurant",
    "bjs restaurant",
    "dave and buster's",
    "dave and busters",
    # Coffee
    "starbucks",
    "dunkin",
    "dunkin donuts",
    # Catering chains
    "clean eatz",
    "cleaneatz",
    "corporate catering",
)

CUISINE_LIMITED_KEYWORDS: tuple[str, ...] = (
    "mexican",
    "tacos",
    "taqueria",
    "burrito",
    "asian",
    "chinese",
    "japanese",
    "sushi",
    "thai",
    "vietnamese",
    "pho",
    "korean",
    "indian",
    "curry",
    "mediterranean",
    "greek",
    "middle eastern",
    "italian",
    "pizzeria",
    "bbq",
    "barbecue",
    "soul food",
    "cajun",
    "creole",
)

_NAME_FRANCHISE_PATTERNS = (
    re.compile(r"#\d+"),  # "Store #123"
    re.compile(r"\b\d{4,}\b"),  # store IDs
    re.compile(r"\blocation\b"),
    re.compile(r"\bunit\b"),
)

_URL_FRANCHISE_PATTERNS = (
    re.compile(r"/locations/"),
    re.compile(r"/store/"),
    re.compile(r"/franchise"),
)

FRANCHISE_REASON = "Possible franchise"


def _first_match(name: str, keywords: tuple[str, ...]) -> str | None:
    for keyword in keywords:
        if keyword in name:
            return keyword
    return None


def detect_chain(business_name: str) -> ClassificationResult:
    normalized = business_name.lower().strip()

    chain = _first_match(normalized, KNOWN_CHAINS)
    if chain:
        return ClassificationResult(is_chain=True, matched_chain=chain)

    cuisine = _first_match(normalized, CUISINE_LIMITED_KEYWORDS)
    if cuisine:
        return ClassificationResult(is_cuisine_limited=True, matched_cuisine=cuisine)

    return ClassificationResult()


def has_franchise_indicators(business_name: str, website_url: str | None = None) -> bool:
    normalized = business_name.lower()
    if any(p.search(normalized) for p in _NAME_FRANCHISE_PATTERNS):
        return True

    if website_url:
        url = website_url.lower()
        return any(p.search(url) for p in _URL_FRANCHISE_PATTERNS)

    return False


def build_flag_reason(result: ClassificationResult, franchise: bool) -> str | None:
    """Pick one reason: known chain, then cuisine keyword, then franchise pattern."""
    if result.is_chain:
        return f"Known chain: {result.matched_chain}"
    if result.is_cuisine_limited:
        return f"Cuisine-limited: {result.matched_cuisine}"
    if franchise:
        return FRANCHISE_REASON
    return None
