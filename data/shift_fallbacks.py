"""
Shift Fallback Grids
Fixed solution rows per grid size, used when the curated pools cannot supply enough words.
Every row is a curated pool word, so any Dictionary accepts the solved grid.
"""

SHIFT_FALLBACKS = {
    4: ["BACK", "CAKE", "FISH", "GOLD"],
    5: ["APPLE", "BREAD", "CHAIR", "ANGEL", "ROCKS"],
}
