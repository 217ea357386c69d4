"""
Mini Crossword Bank
5x5 daily crosswords. '#' marks a black square.
Every across and down run is a real word; clue tuples are (number, clue, row, col, answer).
"""

MINI_PUZZLES = [
    # HEART theme (double word square)
    {
        'solution': [
            "HEART",
            "EMBER",
            "ABUSE",
            "RESIN",
            "TREND",
        ],
        'across': [
            (1, "Organ that pumps blood", 0, 0, "HEART"),
            (6, "Glowing coal", 1, 0, "EMBER"),
            (7, "Misuse", 2, 0, "ABUSE"),
            (8, "Sticky tree secretion", 3, 0, "RESIN"),
            (9, "Fad", 4, 0, "TREND"),
        ],
        'down': [
            (1, "Courage, figuratively", 0, 0, "HEART"),
            (2, "Last bit of a campfire", 0, 1, "EMBER"),
            (3, "Mistreat", 0, 2, "ABUSE"),
            (4, "Pine sap product", 0, 3, "RESIN"),
            (5, "General direction", 0, 4, "TREND"),
        ],
    },
    # BAKERY theme
    {
        'solution': [
            "#SCAB",
            "SHALE",
            "CAKES",
            "ALERT",
            "BEST#",
        ],
        'across': [
            (1, "Crust over a healing cut", 0, 1, "SCAB"),
            (5, "Layered sedimentary rock", 1, 0, "SHALE"),
            (6, "Birthday desserts", 2, 0, "CAKES"),
            (7, "Wide awake", 3, 0, "ALERT"),
            (8, "Top-notch", 4, 0, "BEST"),
        ],
        'down': [
            (1, "Rock that splits into thin sheets", 0, 1, "SHALE"),
            (2, "Bakery display items", 0, 2, "CAKES"),
            (3, "Warning signal", 0, 3, "ALERT"),
            (4, "Finest", 0, 4, "BEST"),
            (5, "Strikebreaker, informally", 1, 0, "SCAB"),
        ],
    },
    # MARKET theme
    {
        'solution': [
            "#TRIM",
            "TRADE",
            "RATES",
            "IDEAS",
            "MESS#",
        ],
        'across': [
            (1, "Cut back a little", 0, 1, "TRIM"),
            (5, "Swap", 1, 0, "TRADE"),
            (6, "Prices per unit", 2, 0, "RATES"),
            (7, "Brainstorm results", 3, 0, "IDEAS"),
            (8, "Untidy state", 4, 0, "MESS"),
        ],
        'down': [
            (1, "Occupation", 0, 1, "TRADE"),
            (2, "Interest figures", 0, 2, "RATES"),
            (3, "Notions", 0, 3, "IDEAS"),
            (4, "Military dining hall", 0, 4, "MESS"),
            (5, "Neat and tidy", 1, 0, "TRIM"),
        ],
    },
    # CRAFTS theme
    {
        'solution': [
            "#PAIL",
            "PASTE",
            "ASHES",
            "ITEMS",
            "LESS#",
        ],
        'across': [
            (1, "Bucket", 0, 1, "PAIL"),
            (5, "Craft glue", 1, 0, "PASTE"),
            (6, "Fireplace leftovers", 2, 0, "ASHES"),
            (7, "Things on a list", 3, 0, "ITEMS"),
            (8, "Not as much", 4, 0, "LESS"),
        ],
        'down': [
            (1, "Copy and ___", 0, 1, "PASTE"),
            (2, "Cinders", 0, 2, "ASHES"),
            (3, "Articles", 0, 3, "ITEMS"),
            (4, "Minus", 0, 4, "LESS"),
            (5, "Beach toy for sand", 1, 0, "PAIL"),
        ],
    },
]
