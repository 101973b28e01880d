"""
Gameplay core: the deterministic simulation behind Garden Defense.
NO UI DEPENDENCIES.
"""
