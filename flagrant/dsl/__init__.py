"""Symbolic expression language: lists and atoms."""
