"""Word pool for the verbal memory game."""

WORDS: tuple[str, ...] = (
    "abandon", "ability", "absence", "academy", "account", "acid", "acre",
    "actor", "address", "adult", "advice", "affair", "agency", "airport",
    "alarm", "album", "alley", "amount", "anchor", "angle", "animal",
    "answer", "apple", "arena", "argument", "armchair", "arrow", "artist",
    "aspect", "attic", "auction", "autumn", "avenue", "badge", "balance",
    "balloon", "bamboo", "banner", "barrel", "basket", "battery", "beach",
    "beacon", "beard", "bedroom", "belief", "bench", "berry", "bicycle",
    "biscuit", "blanket", "blossom", "border", "bottle", "boulder", "bracket",
    "branch", "breeze", "bridge", "bronze", "bucket", "budget", "buffalo",
    "bullet", "butter", "cabin", "cactus", "camera", "canal", "candle",
    "canyon", "carbon", "carpet", "castle", "cattle", "ceiling", "cellar",
    "century", "chamber", "channel", "chapter", "charity", "cherry", "chimney",
    "circle", "climate", "clover", "coffee", "collar", "comet", "compass",
    "copper", "corner", "cottage", "cousin", "crater", "crystal", "cushion",
    "dagger", "dancer", "debate", "decade", "desert", "diamond", "dinner",
    "doctor", "dolphin", "donkey", "dragon", "drawer", "eagle", "echo",
    "editor", "elbow", "embassy", "empire", "engine", "envelope", "evening",
    "fabric", "falcon", "feather", "fence", "festival", "fiction", "finger",
    "forest", "fortune", "fossil", "fountain", "frame", "galaxy", "garden",
    "garlic", "gender", "giant", "ginger", "glacier", "goblet", "gravel",
    "guitar", "hammer", "harbor", "harvest", "helmet", "hermit", "highway",
    "horizon", "island", "ivory", "jacket", "jungle", "kettle", "kingdom",
    "ladder", "lantern", "laptop", "lemon", "library", "lizard", "lobster",
    "magnet", "mammal", "marble", "meadow", "mirror", "monkey", "mortar",
    "napkin", "needle", "nephew", "number", "oxygen", "oyster", "paddle",
    "palace", "parrot", "pebble", "pepper", "pigeon", "pillow", "planet",
    "pocket", "potato", "puzzle", "quarry", "rabbit", "radar", "ribbon",
    "rocket", "saddle", "salmon", "satellite", "scarf", "shadow", "silver",
    "sketch", "spider", "statue", "summit", "tablet", "temple", "thunder",
    "timber", "tomato", "trumpet", "tunnel", "umbrella", "valley", "velvet",
    "violin", "volcano", "wagon", "walnut", "whistle", "window", "wizard",
    "yogurt", "zebra",
)
