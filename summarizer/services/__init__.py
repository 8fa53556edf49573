"""Collaborator services around the completion orchestrator."""
