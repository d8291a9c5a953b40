"""Mahjong Solitaire board engine and HTTP API."""
