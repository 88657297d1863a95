"""
issueforge - Issue form editor core

Assembles a structured issue-template definition in memory and serializes it
into a GitHub issue-form YAML document.

Architecture:
- Modeling Context: Mutable template model (metadata + ordered sections)
- Serialization Context: Pure model -> YAML document derivation
- Editing Context: Session that applies edits and hands the document to a copy sink
"""

__version__ = "0.1.0"
