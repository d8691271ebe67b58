"""Shared components used across prize pool packages."""
