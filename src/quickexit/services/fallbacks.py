"""Hand-written fallback excuses keyed by category and tone."""

from quickexit.domain.excuse import Category, Tone

DEFAULT_FALLBACK_EXCUSES: tuple[str, ...] = (
    "I just got a call from my family - there's an emergency and they need me "
    "to come home immediately.",
    "I'm sorry, I need to leave immediately due to an unexpected situation.",
    "Something just came up that I really have to deal with right now. "
    "I'm so sorry to run off like this.",
)

FALLBACK_EXCUSES: dict[tuple[Category, Tone], tuple[str, ...]] = {
    # Work
    (Category.WORK, Tone.FRIENDLY): (
        "I'm so sorry, my manager just messaged me about a client issue that "
        "can't wait. I hate to cut this short, but I have to go sort it out.",
        "Ugh, work just pinged me - a report I sent out has a mistake and they "
        "need it fixed tonight. Thanks so much for having me!",
    ),
    (Category.WORK, Tone.URGENT): (
        "Sorry, my boss just called about an urgent project deadline I forgot "
        "about. I need to head home to work on it right away!",
        "The servers at work just went down and I'm the one on call. "
        "I have to leave right now.",
    ),
    (Category.WORK, Tone.SUBTLE): (
        "I should probably head out, I've got an early start tomorrow and some "
        "prep I haven't finished.",
        "Work sent over something I need to look at tonight, so I'm going to "
        "slip out.",
    ),
    # Family
    (Category.FAMILY, Tone.FRIENDLY): (
        "I'm really sorry, my sister just called and needs a hand with the kids "
        "tonight. I promised I'd help, so I need to head over.",
        "My mom just texted asking me to come by, she sounded a bit off. "
        "I'd feel better checking on her. Sorry to leave early!",
    ),
    (Category.FAMILY, Tone.URGENT): (
        "I just got a call from my family - there's an emergency and they need "
        "me to come home immediately.",
        "My dad just called from the hospital, I don't have details yet but I "
        "have to go right now.",
    ),
    (Category.FAMILY, Tone.SUBTLE): (
        "I told my parents I'd call them tonight and it's getting late, "
        "so I'm going to head home.",
        "Family thing came up, nothing major, but I should get going.",
    ),
    # Health
    (Category.HEALTH, Tone.FRIENDLY): (
        "I'm so sorry, I'm starting to get one of my migraines. I think I need "
        "to go lie down before it gets bad. Thank you for tonight!",
        "I'm not feeling great all of a sudden, I'd rather head home than bring "
        "the mood down. Let's catch up soon!",
    ),
    (Category.HEALTH, Tone.URGENT): (
        "I'm not feeling well suddenly. I think I should head home and rest "
        "before it gets worse.",
        "I think I'm having a reaction to something I ate - I need to go take "
        "my medication right now.",
    ),
    (Category.HEALTH, Tone.SUBTLE): (
        "I'm feeling a bit run down, I think I'll call it a night.",
        "My stomach's been a little off, so I'm going to head out early.",
    ),
    # Transport
    (Category.TRANSPORT, Tone.FRIENDLY): (
        "So sorry, my ride just texted that they're outside and can't wait long. "
        "Thanks for a lovely time!",
        "I just realized the last train leaves soon and I really can't miss it. "
        "Sorry to dash off!",
    ),
    (Category.TRANSPORT, Tone.URGENT): (
        "My ride just texted that they need to leave now, and it's my only way "
        "home tonight.",
        "I just got an alert that my car is about to be towed. I have to go "
        "move it right now!",
    ),
    (Category.TRANSPORT, Tone.SUBTLE): (
        "I should grab the next bus before they stop running.",
        "Parking's about to run out, I'd better head off.",
    ),
}


def get_fallback_pool(category: str, tone: str) -> tuple[str, ...]:
    """Return the fallback excuses for a pairing, or the default pool."""
    try:
        key = (Category(category), Tone(tone))
    except ValueError:
        return DEFAULT_FALLBACK_EXCUSES
    return FALLBACK_EXCUSES.get(key, DEFAULT_FALLBACK_EXCUSES)
