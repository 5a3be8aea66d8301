"""Chirper social-networking backend core."""
