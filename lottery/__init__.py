"""Lottery ticket service."""
