"""
Grid Fallback Racks
Pre-computed letter sets used when generation exhausts its retry budget, so a puzzle exists every day.

Each rack ships with the layout that solves it: (word, row, col, direction).
Every word comes from the curated generation pools, so any Dictionary accepts it,
and the layout uses each rack letter exactly once.
"""

GRID_FALLBACKS = [
    {
        'letters': "BRIDGEOATDGE",
        'hint': "BRIDGE + BOAT + EDGE",
        'words': [("BRIDGE", 0, 0, 'horizontal'), ("BOAT", 0, 0, 'vertical'), ("EDGE", 0, 5, 'vertical')],
    },
    {
        'letters': "CAMELOATOPID",
        'hint': "CAMEL + COAT + MOP + LID",
        'words': [
            ("CAMEL", 0, 0, 'horizontal'), ("COAT", 0, 0, 'vertical'),
            ("MOP", 0, 2, 'vertical'), ("LID", 0, 4, 'vertical'),
        ],
    },
    {
        'letters': "APPLECEIGAST",
        'hint': "APPLE + ACE + PIG + EAST",
        'words': [
            ("APPLE", 0, 0, 'horizontal'), ("ACE", 0, 0, 'vertical'),
            ("PIG", 0, 2, 'vertical'), ("EAST", 0, 4, 'vertical'),
        ],
    },
    {
        'letters': "ANIMALREAION",
        'hint': "ANIMAL + AREA + LION",
        'words': [("ANIMAL", 0, 0, 'horizontal'), ("AREA", 0, 0, 'vertical'), ("LION", 0, 5, 'vertical')],
    },
    {
        'letters': "BASKETEARENT",
        'hint': "BASKET + BEAR + TENT",
        'words': [("BASKET", 0, 0, 'horizontal'), ("BEAR", 0, 0, 'vertical'), ("TENT", 0, 5, 'vertical')],
    },
    {
        'letters': "CANDLEAKEACH",
        'hint': "CANDLE + CAKE + EACH",
        'words': [("CANDLE", 0, 0, 'horizontal'), ("CAKE", 0, 0, 'vertical'), ("EACH", 0, 5, 'vertical')],
    },
    {
        'letters': "AIRPORTCEIME",
        'hint': "AIRPORT + ACE + TIME",
        'words': [("AIRPORT", 0, 0, 'horizontal'), ("ACE", 0, 0, 'vertical'), ("TIME", 0, 6, 'vertical')],
    },
]
