"""Bloglist — a small blog-listing service.

Users register, log in, and post or delete blog entries they own.
The interesting part is the auth pipeline: bcrypt password hashing,
signed JWT bearer tokens, per-request identity extraction, and
ownership checks on every mutation.
"""

__version__ = "0.1.0"
