"""Hand-built inputs with a known answer."""

# (values, expected duplicate)
STRADDLING_PAIR = ([1, 2, 3, 4, 5, 6, 2, 7], 2)
ADJACENT_PAIR = ([5, 5], 5)
NO_DUPLICATE = ([1, 2, 3], None)

# Length 16: the pair sits inside the last quarter, so the first round finds it.
SAME_QUARTER_PAIR = ([16, 3, 8, 1, 12, 4, 9, 14, 2, 15, 7, 10, 11, 13, 11, 0], 11)

# Length 16: the pair spans quarters 0 and 1 but shares the first half.
SAME_HALF_PAIR = ([40, 41, 42, -3, -3, 44, 45, 46, 47, 48, 49, 50, 51, 52, 53, 54], -3)

UNIQUE_16 = (list(range(100, 116)), None)

SCENARIOS = [
    STRADDLING_PAIR,
    ADJACENT_PAIR,
    NO_DUPLICATE,
    SAME_QUARTER_PAIR,
    SAME_HALF_PAIR,
    UNIQUE_16,
]

# Scenarios whose length is divisible by 4, 2 and 1.
EVEN_SCENARIOS = [STRADDLING_PAIR, SAME_QUARTER_PAIR, SAME_HALF_PAIR, UNIQUE_16]
