"""
Building the social graph:
- the in-memory graph store (nodes, undirected edges, attribute indexes)
- bulk loaders from JSON / CSV and export to NetworkX
- a seeded generator of random users and friendships.
"""
