"""
Score classification and explanation: pure functions, no I/O.

Modules
-------
tiers        : classify() + badge_color() + badge_label() + score_badge()
               — maps a 0–100 score to a ScoreTier and its badge strings.
explanations : explain() — returns author-supplied reasoning when present,
               otherwise a fixed per-kind, per-tier template.
"""
