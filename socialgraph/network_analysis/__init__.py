"""
Read-only analytics on the social graph:
- bounded-depth breadth-first traversal
- friend-of-friend suggestions ranked by mutual friends
- eigenvector centrality by power iteration.
"""
