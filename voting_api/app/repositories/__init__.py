"""
Storage layer for candidates and votes.

Each module declares a repository protocol and an in‑memory
implementation of it.  State lives only for the lifetime of the
process.
"""
