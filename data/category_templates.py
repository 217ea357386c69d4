"""
Sort Category Templates
Category definitions with word pools for puzzle generation.
Difficulty 1 is the most obvious connection, 4 the most devious.
"""

from models.sort import CategoryTemplate


CATEGORY_TEMPLATES = [
    # Difficulty 1
    CategoryTemplate(
        id='synonyms_happy',
        category="Synonyms for happy",
        difficulty=1,
        words=('GLAD', 'JOYFUL', 'PLEASED', 'CHEERFUL', 'CONTENT', 'MERRY', 'ELATED', 'UPBEAT'),
    ),
    CategoryTemplate(
        id='synonyms_sad',
        category="Synonyms for sad",
        difficulty=1,
        words=('GLOOMY', 'SOMBER', 'MELANCHOLY', 'DEJECTED', 'DOWNCAST', 'BLUE', 'GLUM', 'MOURNFUL'),
    ),
    CategoryTemplate(
        id='synonyms_fast',
        category="Synonyms for fast",
        difficulty=1,
        words=('QUICK', 'RAPID', 'SWIFT', 'SPEEDY', 'BRISK', 'HASTY', 'FLEET', 'NIMBLE'),
    ),
    CategoryTemplate(
        id='synonyms_big',
        category="Synonyms for big",
        difficulty=1,
        words=('LARGE', 'HUGE', 'VAST', 'GIANT', 'MASSIVE', 'ENORMOUS', 'IMMENSE', 'COLOSSAL'),
    ),
    CategoryTemplate(
        id='synonyms_small',
        category="Synonyms for small",
        difficulty=1,
        words=('TINY', 'LITTLE', 'MINI', 'PETITE', 'MINUTE', 'COMPACT', 'SLIGHT', 'WEE'),
    ),
    CategoryTemplate(
        id='rhymes_ake',
        category="Rhymes with CAKE",
        difficulty=1,
        words=('LAKE', 'MAKE', 'STAKE', 'BRAKE', 'SHAKE', 'WAKE', 'BAKE', 'FAKE'),
    ),
    CategoryTemplate(
        id='rhymes_ay',
        category="Rhymes with DAY",
        difficulty=1,
        words=('WAY', 'SAY', 'PLAY', 'STAY', 'CLAY', 'GRAY', 'SWAY', 'PRAY'),
    ),
    CategoryTemplate(
        id='rhymes_ow',
        category="Rhymes with SHOW",
        difficulty=1,
        words=('FLOW', 'GLOW', 'GROW', 'KNOW', 'SLOW', 'SNOW', 'THROW', 'BLOW'),
    ),
    CategoryTemplate(
        id='colors',
        category="Colors",
        difficulty=1,
        words=('RED', 'BLUE', 'GREEN', 'YELLOW', 'ORANGE', 'PURPLE', 'PINK', 'BROWN', 'BLACK', 'WHITE', 'GRAY', 'TEAL'),
    ),
    CategoryTemplate(
        id='fruits',
        category="Fruits",
        difficulty=1,
        words=('APPLE', 'BANANA', 'CHERRY', 'GRAPE', 'LEMON', 'MANGO', 'ORANGE', 'PEACH', 'PEAR', 'PLUM', 'MELON', 'BERRY'),
    ),

    # Difficulty 2
    CategoryTemplate(
        id='compound_fire',
        category="___FIRE or FIRE___",
        difficulty=2,
        words=('FIREMAN', 'FIREPLACE', 'FIREFLY', 'FIREWORK', 'CAMPFIRE', 'BONFIRE', 'WILDFIRE', 'GUNFIRE'),
    ),
    CategoryTemplate(
        id='compound_water',
        category="___WATER or WATER___",
        difficulty=2,
        words=('WATERFALL', 'WATERMELON', 'UNDERWATER', 'RAINWATER', 'WATERPROOF', 'WATERTIGHT', 'WATERCOLOR', 'WATERSHED'),
    ),
    CategoryTemplate(
        id='compound_ball',
        category="___BALL",
        difficulty=2,
        words=('FOOTBALL', 'BASKETBALL', 'BASEBALL', 'VOLLEYBALL', 'SNOWBALL', 'FIREBALL', 'EYEBALL', 'MEATBALL'),
    ),
    CategoryTemplate(
        id='compound_book',
        category="___BOOK or BOOK___",
        difficulty=2,
        words=('NOTEBOOK', 'TEXTBOOK', 'BOOKMARK', 'BOOKWORM', 'HANDBOOK', 'YEARBOOK', 'COOKBOOK', 'FACEBOOK'),
    ),
    CategoryTemplate(
        id='compound_house',
        category="___HOUSE or HOUSE___",
        difficulty=2,
        words=('GREENHOUSE', 'LIGHTHOUSE', 'WAREHOUSE', 'FIREHOUSE', 'HOUSEHOLD', 'HOUSEBOAT', 'TREEHOUSE', 'PENTHOUSE'),
    ),
    CategoryTemplate(
        id='double_letters',
        category="Words with double letters",
        difficulty=2,
        words=('BOOK', 'COOL', 'KEEN', 'FLEE', 'PEER', 'BUZZ', 'JAZZ', 'FIZZ', 'ZOOM', 'BOOM', 'ROOM', 'MOON'),
    ),
    CategoryTemplate(
        id='silent_letters',
        category="Words with silent letters",
        difficulty=2,
        words=('KNIGHT', 'KNIFE', 'KNOCK', 'KNOW', 'GNOME', 'GNAT', 'WRECK', 'WRIST', 'WRITE', 'WRONG', 'LAMB', 'COMB'),
    ),
    CategoryTemplate(
        id='body_parts',
        category="Body parts",
        difficulty=2,
        words=('HAND', 'FOOT', 'HEAD', 'KNEE', 'ELBOW', 'WRIST', 'ANKLE', 'THUMB', 'CHEST', 'SPINE', 'BRAIN', 'HEART'),
    ),
    CategoryTemplate(
        id='musical_instruments',
        category="Musical instruments",
        difficulty=2,
        words=('PIANO', 'GUITAR', 'VIOLIN', 'DRUMS', 'FLUTE', 'TRUMPET', 'CELLO', 'HARP', 'BASS', 'HORN', 'ORGAN', 'BANJO'),
    ),
    CategoryTemplate(
        id='weather',
        category="Weather words",
        difficulty=2,
        words=('RAIN', 'SNOW', 'WIND', 'STORM', 'CLOUD', 'SUNNY', 'FOGGY', 'HAIL', 'SLEET', 'FROST', 'HUMID', 'BREEZE'),
    ),

    # Difficulty 3
    CategoryTemplate(
        id='homophones_numbers',
        category="Homophones of numbers",
        difficulty=3,
        words=('WON', 'TOO', 'ATE', 'FORE', 'SEW', 'SICKS', 'WAIT', 'KNIGHT'),
    ),
    CategoryTemplate(
        id='words_in_words',
        category="Words containing HAND",
        difficulty=3,
        words=('HANDLE', 'HANDED', 'HANDY', 'HANDSOME', 'HANDBALL', 'HANDMADE', 'HANDBOOK', 'HANDSHAKE'),
    ),
    CategoryTemplate(
        id='starts_with_body',
        category="Start with body part",
        difficulty=3,
        words=('HEADACHE', 'HEADLINE', 'HANDBOOK', 'FOOTSTEP', 'FOOTNOTE', 'ARMCHAIR', 'EYEBROW', 'LEGROOM'),
    ),
    CategoryTemplate(
        id='greek_letters',
        category="Greek letters",
        difficulty=3,
        words=('ALPHA', 'BETA', 'GAMMA', 'DELTA', 'THETA', 'SIGMA', 'OMEGA', 'KAPPA', 'LAMBDA', 'EPSILON', 'PI', 'PHI'),
    ),
    CategoryTemplate(
        id='types_of_dance',
        category="Types of dance",
        difficulty=3,
        words=('WALTZ', 'TANGO', 'SALSA', 'BALLET', 'SWING', 'DISCO', 'POLKA', 'FOXTROT', 'RUMBA', 'MAMBO', 'HIP HOP', 'TAP'),
    ),
    CategoryTemplate(
        id='card_games',
        category="Card games",
        difficulty=3,
        words=('POKER', 'BRIDGE', 'HEARTS', 'SPADES', 'RUMMY', 'BLACKJACK', 'SOLITAIRE', 'WAR', 'UNO', 'CANASTA', 'GIN', 'CRAZY EIGHTS'),
    ),
    CategoryTemplate(
        id='palindromes',
        category="Palindromes",
        difficulty=3,
        words=('RADAR', 'LEVEL', 'CIVIC', 'KAYAK', 'REFER', 'MADAM', 'ROTOR', 'TENET', 'NOON', 'MOM', 'DAD', 'POP'),
    ),
    CategoryTemplate(
        id='words_with_q',
        category="Words containing Q",
        difficulty=3,
        words=('QUEEN', 'QUEST', 'QUICK', 'QUOTE', 'QUILT', 'QUIET', 'SQUID', 'SQUAD', 'QUIT', 'QUIZ', 'QUAKE', 'SQUASH'),
    ),

    # Difficulty 4
    CategoryTemplate(
        id='also_names',
        category="Words that are also names",
        difficulty=4,
        words=('ROSE', 'VIOLET', 'DAISY', 'LILY', 'IRIS', 'FERN', 'CLIFF', 'FRANK', 'GRANT', 'BILL', 'MARK', 'PENNY'),
    ),
    CategoryTemplate(
        id='silent_first_letter',
        category="Silent first letter",
        difficulty=4,
        words=('KNIGHT', 'KNIFE', 'KNOCK', 'KNOW', 'GNOME', 'GNAT', 'WRONG', 'WRITE', 'WRAP', 'WRECK', 'WRIST', 'PSALM'),
    ),
    CategoryTemplate(
        id='double_meaning',
        category="Words that are also verbs",
        difficulty=4,
        words=('WATCH', 'PLANT', 'PARK', 'LIGHT', 'MATCH', 'FILM', 'TRAIN', 'DUCK', 'NAIL', 'WAVE', 'SCALE', 'RING'),
    ),
    CategoryTemplate(
        id='ends_in_ight',
        category="End in -IGHT",
        difficulty=4,
        words=('LIGHT', 'NIGHT', 'RIGHT', 'SIGHT', 'MIGHT', 'FIGHT', 'TIGHT', 'BRIGHT', 'SLIGHT', 'FLIGHT', 'FRIGHT', 'HEIGHT'),
    ),
    CategoryTemplate(
        id='three_vowels',
        category="Words with 3+ vowels",
        difficulty=4,
        words=('AUDIO', 'QUEUE', 'ADIEU', 'SEQUOIA', 'COOKIE', 'MOVIE', 'LOUIE', 'AVENUE', 'AMOEBA', 'IONAIRE', 'AWESOME', 'BANANA'),
    ),
    CategoryTemplate(
        id='animal_verbs',
        category="Animals that are also verbs",
        difficulty=4,
        words=('DUCK', 'FISH', 'SNAKE', 'WEASEL', 'BADGER', 'HOUND', 'RAM', 'CROW', 'PARROT', 'APE', 'WOLF', 'BUFFALO'),
    ),
    CategoryTemplate(
        id='food_slang',
        category="Foods used as slang",
        difficulty=4,
        words=('BREAD', 'CHEESE', 'BACON', 'BEEF', 'TOAST', 'JAM', 'PICKLE', 'BEANS', 'CREAM', 'SAUCE', 'GRAVY', 'NUTS'),
    ),
]
