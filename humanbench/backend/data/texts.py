"""Passages for the typing test."""

TEXTS: tuple[str, ...] = (
    "The quick brown fox jumps over the lazy dog while the farmer watches "
    "from the porch and wonders why the dog never bothers to chase it.",
    "A journey of a thousand miles begins with a single step, but most "
    "people spend the first hundred miles wondering where they left the map.",
    "Rain drummed on the tin roof all night, and by morning the creek had "
    "climbed over its banks and wandered halfway across the meadow.",
    "She typed the final line of the report, leaned back in her chair, and "
    "realised she had forgotten to save a single word of it.",
    "Old lighthouses along the coast still guide sailors home, though most "
    "of them now run on timers instead of patient keepers.",
    "The library was quiet except for the soft scratch of pencils and the "
    "occasional sigh of someone who had lost their place.",
)
