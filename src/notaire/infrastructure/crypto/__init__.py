"""
Signature verifier adapters.

Each module imports its own third-party stack, so import them directly
(or through the DI container) to keep unused schemes unloaded.
"""
