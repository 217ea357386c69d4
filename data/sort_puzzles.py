"""
Sort Puzzle Bank
Hand-crafted daily grouping puzzles: 16 words sorted into 4 groups of 4.
Categories are fair and discoverable through language knowledge, not trivia.
"""

from models.sort import SortGroup


SORT_PUZZLES = [
    (
        SortGroup("Synonyms for FAST", ("QUICK", "RAPID", "SWIFT", "SPEEDY"), 1),
        SortGroup("Words with double letters", ("COFFEE", "BALLOON", "TOFFEE", "BUFFALO"), 2),
        SortGroup("___LIGHT", ("DAY", "FLASH", "MOON", "SPOT"), 3),
        SortGroup("Rhymes with CAKE", ("LAKE", "BAKE", "STAKE", "FLAKE"), 4),
    ),
    (
        SortGroup("Things that are COLD", ("ICE", "SNOW", "FROST", "SLEET"), 1),
        SortGroup("Start with UN-", ("UNDO", "UNLOCK", "UNWIND", "UNFOLD"), 2),
        SortGroup("WATER___", ("FALL", "FRONT", "PROOF", "MELON"), 3),
        SortGroup("Homophones of numbers", ("WON", "TOO", "ATE", "FORE"), 4),
    ),
    (
        SortGroup("Body parts", ("HAND", "FOOT", "HEAD", "KNEE"), 1),
        SortGroup("End with -LY", ("QUICKLY", "SLOWLY", "KINDLY", "SOFTLY"), 2),
        SortGroup("BLACK___", ("BIRD", "BOARD", "SMITH", "BERRY"), 3),
        SortGroup("Can follow FIRE", ("TRUCK", "FLY", "PLACE", "WORK"), 4),
    ),
    (
        SortGroup("Colors", ("BLUE", "PURPLE", "YELLOW", "ORANGE"), 1),
        SortGroup("Compound with HOUSE", ("DOG", "LIGHT", "GREEN", "WARE"), 2),
        SortGroup("Silent letters", ("KNIGHT", "GNOME", "WRITE", "DOUBT"), 3),
        SortGroup("Anagrams of POTS", ("SPOT", "STOP", "TOPS", "POST"), 4),
    ),
    (
        SortGroup("Kitchen items", ("SPOON", "FORK", "KNIFE", "PLATE"), 1),
        SortGroup("Rhymes with NIGHT", ("LIGHT", "SIGHT", "MIGHT", "FLIGHT"), 2),
        SortGroup("___BALL", ("BASE", "BASKET", "FOOT", "SNOW"), 3),
        SortGroup("Palindromes", ("RADAR", "LEVEL", "CIVIC", "KAYAK"), 4),
    ),
    (
        SortGroup("Weather phenomena", ("RAIN", "WIND", "STORM", "CLOUD"), 1),
        SortGroup("Start with RE-", ("REDO", "RETURN", "REPLAY", "REWIND"), 2),
        SortGroup("SUN___", ("RISE", "SET", "BURN", "FLOWER"), 3),
        SortGroup("Silent K", ("KNEE", "KNIFE", "KNOCK", "KNOW"), 4),
    ),
    (
        SortGroup("Fruits", ("APPLE", "GRAPE", "PEACH", "MANGO"), 1),
        SortGroup("End with -TION", ("NATION", "MOTION", "POTION", "ACTION"), 2),
        SortGroup("BOOK___", ("WORM", "CASE", "MARK", "SHELF"), 3),
        SortGroup("Words spelled same forwards/backwards", ("NOON", "DEED", "PEEP", "TOOT"), 4),
    ),
    (
        SortGroup("Emotions", ("HAPPY", "ANGRY", "SCARED", "PROUD"), 1),
        SortGroup("Start with OUT-", ("OUTSIDE", "OUTRUN", "OUTLAST", "OUTLOOK"), 2),
        SortGroup("___HAND", ("BACK", "SHORT", "FIRST", "FREE"), 3),
        SortGroup("Contain all vowels A,E,I,O,U...", ("SEQUOIA", "EQUATION", "AUTHORIZE", "FACETIOUS"), 4),
    ),
    (
        SortGroup("Musical instruments", ("PIANO", "GUITAR", "VIOLIN", "DRUMS"), 1),
        SortGroup("Words with QU", ("QUEEN", "QUIET", "QUEST", "QUICK"), 2),
        SortGroup("AIR___", ("PORT", "PLANE", "LINE", "CRAFT"), 3),
        SortGroup("Heteronyms (same spelling, different pronunciation)", ("LEAD", "WIND", "TEAR", "BOW"), 4),
    ),
    (
        SortGroup("Animals with tails", ("DOG", "CAT", "HORSE", "MOUSE"), 1),
        SortGroup("End with -NESS", ("KINDNESS", "DARKNESS", "SADNESS", "MADNESS"), 2),
        SortGroup("TOOTH___", ("BRUSH", "PASTE", "PICK", "ACHE"), 3),
        SortGroup("Words where Y sounds like I", ("GYM", "MYTH", "HYMN", "LYNX"), 4),
    ),
    (
        SortGroup("Things in a classroom", ("DESK", "CHAIR", "BOARD", "PENCIL"), 1),
        SortGroup("Start with PRE-", ("PREFIX", "PREVIEW", "PREDICT", "PREPARE"), 2),
        SortGroup("FIRE___", ("FIGHTER", "PLACE", "WORKS", "FLY"), 3),
        SortGroup("One-syllable past tenses", ("RAN", "SAW", "WENT", "THOUGHT"), 4),
    ),
    (
        SortGroup("Types of trees", ("OAK", "PINE", "MAPLE", "BIRCH"), 1),
        SortGroup("Words with PH making F sound", ("PHONE", "PHOTO", "GRAPH", "SPHERE"), 2),
        SortGroup("HEAD___", ("LINE", "BAND", "LIGHT", "ACHE"), 3),
        SortGroup("Words that lose a letter when pluralized", ("GOOSE", "MOUSE", "LOUSE", "TOOTH"), 4),
    ),
    (
        SortGroup("Vegetables", ("CARROT", "POTATO", "ONION", "PEPPER"), 1),
        SortGroup("End with -FUL", ("HELPFUL", "CAREFUL", "HOPEFUL", "HANDFUL"), 2),
        SortGroup("BACK___", ("YARD", "PACK", "BONE", "GROUND"), 3),
        SortGroup("Words where C sounds like S", ("CELL", "CITY", "CYCLE", "CIDER"), 4),
    ),
    (
        SortGroup("Office supplies", ("STAPLER", "PAPER", "TAPE", "CLIP"), 1),
        SortGroup("Start with MIS-", ("MISTAKE", "MISREAD", "MISLEAD", "MISFIRE"), 2),
        SortGroup("SEA___", ("SHORE", "FOOD", "SHELL", "WEED"), 3),
        SortGroup("Words with silent B", ("CLIMB", "THUMB", "LAMB", "COMB"), 4),
    ),
    (
        SortGroup("Tools", ("HAMMER", "WRENCH", "DRILL", "PLIERS"), 1),
        SortGroup("Words with double O", ("MOON", "BOOK", "FOOD", "COOL"), 2),
        SortGroup("RAIN___", ("BOW", "DROP", "COAT", "FOREST"), 3),
        SortGroup("Words ending in -GH that sounds like F", ("COUGH", "TOUGH", "ROUGH", "ENOUGH"), 4),
    ),
]
