"""Example studies built on the bank queue model."""
