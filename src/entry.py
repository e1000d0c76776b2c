class Entry:
    """Occurrence count and casing variants for one lowercase word."""

    def __init__(self, word):
        self.key = word.lower()
        self.count = 0
        self.variants = []
        self.has_variants = False
        self.record_occurrence(word)

    def record_occurrence(self, surface_form):
        self.count += 1
        if surface_form not in self.variants:
            self.variants.append(surface_form)
        if surface_form != self.key:
            self.has_variants = True

    def __str__(self):
        if self.has_variants:
            return f"{self.key} ({' '.join(self.variants)}) - {self.count}"
        return f"{self.key} - {self.count}"

    def __repr__(self):
        return f"Entry(key={self.key!r}, count={self.count}, variants={self.variants!r})"
