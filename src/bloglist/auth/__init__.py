"""Authentication and authorization.

Learn: Four pieces, leaves first:
1. password — bcrypt hashing and verification of account passwords
2. jwt — signed, expiring bearer tokens (issue on login, decode per request)
3. dependencies — per-request identity extraction from the Authorization header
4. ownership — owner-vs-not-owner decision for blog mutations

Login uses 1 + 2 directly; every protected route runs 3; mutating blog
routes add 4.
"""
