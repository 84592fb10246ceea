# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
ghclient CLI

Usage:
    ghc user                                  # Who does the token belong to
    ghc repos my-org                          # List organization repositories
    ghc milestones list owner repo            # List milestones
    ghc ms close owner repo "v1.0"            # Close a milestone by title
"""

from .main import cli

__all__ = ['cli']
