"""Lifehacking tips backend: favorites reconciliation and ownership-gated user access."""
