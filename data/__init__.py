"""Static puzzle data: word pools, phrase bank, category templates and hand-authored banks."""
