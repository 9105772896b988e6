"""
Adapters implementing the engine's ports and host-facing data providers.
"""
