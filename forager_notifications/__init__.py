"""Firestore-triggered notification handlers for the Forager social features."""
