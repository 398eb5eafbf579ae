"""
Core coordinate contract, numeric primitives, and concrete point types.

This module contains the foundational building blocks: the scalar and
coordinate capability contracts, their derived operations, and ready-made
point models that satisfy them.
"""
