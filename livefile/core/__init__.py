"""Core package: the File entity and its collaborators' wiring."""
