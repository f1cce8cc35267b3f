"""
Compiled-in word list, used when no dictionary file is supplied.
"""

DEFAULT_WORDS: tuple[str, ...] = (
    "able", "acid", "actor", "admiral", "afraid", "agent", "alarm", "album",
    "alert", "almond", "amber", "anchor", "angle", "ankle", "answer", "apple",
    "april", "arctic", "arena", "armor", "arrow", "artist", "aspen", "atlas",
    "attic", "august", "autumn", "avenue", "bacon", "badge", "bakery", "balcony",
    "bamboo", "banana", "banner", "barrel", "basket", "beacon", "beaver", "bicycle",
    "binder", "biscuit", "blanket", "blossom", "border", "bottle", "bracket", "breeze",
    "brick", "bridge", "bronze", "bucket", "buffalo", "butter", "cabin", "cactus",
    "camera", "candle", "canoe", "canyon", "carbon", "carpet", "castle", "cedar",
    "cellar", "cement", "chalk", "cherry", "chimney", "cinder", "circus", "clover",
    "cobalt", "coffee", "comet", "copper", "coral", "cotton", "cougar", "crane",
    "crater", "cricket", "crystal", "cupboard", "dagger", "dancer", "delta", "desert",
    "diamond", "dolphin", "donkey", "dragon", "drawer", "eagle", "easel", "eclipse",
    "elbow", "ember", "engine", "falcon", "feather", "fender", "ferry", "fiddle",
    "flint", "forest", "fossil", "fountain", "fox", "frost", "galaxy", "garden",
    "garlic", "gazelle", "geyser", "ginger", "glacier", "goblet", "granite", "gravel",
    "guitar", "hammer", "harbor", "harvest", "hazel", "helmet", "heron", "hockey",
    "honey", "horizon", "igloo", "island", "ivory", "jacket", "jaguar", "jasmine",
    "jersey", "jigsaw", "jungle", "kettle", "kidney", "kitten", "ladder", "lagoon",
    "lantern", "laptop", "lemon", "lettuce", "library", "lilac", "lizard", "lobster",
    "locket", "magnet", "mango", "maple", "marble", "meadow", "melon", "mirror",
    "monkey", "mosaic", "muffin", "napkin", "nectar", "needle", "nickel", "noodle",
    "oasis", "ocean", "olive", "onion", "orange", "orbit", "orchid", "otter",
    "oyster", "paddle", "palace", "panda", "parrot", "pebble", "pencil", "pepper",
    "pigeon", "pillow", "planet", "plaster", "pocket", "potato", "prairie", "pumpkin",
    "puzzle", "quartz", "quiver", "rabbit", "radish", "raven", "ribbon", "river",
    "rocket", "saddle", "salmon", "sandal", "saucer", "scarf", "shadow", "shovel",
    "silver", "sketch", "spider", "spoon", "squirrel", "statue", "summit", "sunset",
    "teapot", "tiger", "timber", "toast", "tomato", "tulip", "tunnel", "turtle",
    "umbrella", "valley", "velvet", "violin", "volcano", "wagon", "walnut", "walrus",
    "whistle", "willow", "window", "winter", "wizard", "wolf", "yogurt", "zebra",
)
