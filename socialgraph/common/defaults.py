"""Default constants for the graph store, the analytics and the data generator."""

# === RELATIONS ===

DEFAULT_RELATION = "is_friend"

# === EIGENVECTOR CENTRALITY ===

DEFAULT_TOLERANCE = 0.01
DEFAULT_MAX_ITERATIONS = 10000

# === TRAVERSAL ===

# Friend-of-friend suggestions look exactly two hops out.
SUGGESTION_DEPTH = 2

# === SYNTHETIC DATA ===

NUMBER_OF_USERS = 10000
NUMBER_OF_RELATIONS = 100000
GENDERS = ("male", "female")
MAX_AGE = 90
DEFAULT_SEED = 42
INDEXED_ATTRIBUTES = ("age",)
